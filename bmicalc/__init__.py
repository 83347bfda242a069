"""Body mass index calculation, input validation and WHO/DGE weight classifications."""

__version__ = "1.2.1"