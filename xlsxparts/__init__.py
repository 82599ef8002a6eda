"""Building blocks for the parts of XLSX packages: content types, document
properties, media files, data validation, cell formats, number format codes,
zip reading and style copying."""

__version__ = "0.1.0"