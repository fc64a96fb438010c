"""Unit conversions for hydration and weight values."""

ML_PER_OUNCE = 29.5735295625
GRAMS_PER_POUND = 453.59237


def convert_ounces_to_ml(ounces: float) -> float:
    """Convert US fluid ounces to millilitres."""
    return ounces * ML_PER_OUNCE


def convert_ml_to_ounces(ml: float) -> float:
    """Convert millilitres to US fluid ounces."""
    return ml / ML_PER_OUNCE


def grams_to_pounds(grams: float) -> float:
    return grams / GRAMS_PER_POUND


def pounds_to_grams(pounds: float) -> float:
    return pounds * GRAMS_PER_POUND
