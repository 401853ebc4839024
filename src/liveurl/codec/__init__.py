"""src/liveurl/codec/__init__.py

Text codecs used by the URL model.
"""

from .form import encode_form_encoded, form_encode, parse_form_encoded, percent_decode

__all__ = [
    "percent_decode",
    "form_encode",
    "parse_form_encoded",
    "encode_form_encoded",
]
