from .gdpr import define_gdpr
from .hipaa import define_hipaa

__all__ = [
    "define_gdpr",
    "define_hipaa",
]
