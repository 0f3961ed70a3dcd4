"""
NullScript: a playful alias vocabulary that rewrites into TypeScript.
"""

from nullscript.rewrite.engine import rewrite

__all__ = ["rewrite", "transpile", "translate", "validate"]


def transpile(*args, **kwargs):
    from nullscript.pipeline.transpile import transpile as _transpile

    return _transpile(*args, **kwargs)


def translate(*args, **kwargs):
    from nullscript.diagnostics.translate import translate as _translate

    return _translate(*args, **kwargs)


def validate(*args, **kwargs):
    from nullscript.validation.validator import validate as _validate

    return _validate(*args, **kwargs)
