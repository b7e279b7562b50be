"""Building blocks for interactive command line interfaces: splitting, argument conversion, colours, key decoding and telnet handling."""

__version__ = "0.1.0"