"""Swedish identity number parsing and validation.

The ssn layer converts a `YYMMDD[-|+]XXXX` string into a strict, immutable `IdentityNumber`, or
into a typed `ParseError` describing the first failed check.
"""
