"""Feed an input file through two piped commands into an output file, with small helper modules."""

__version__ = "0.1.0"