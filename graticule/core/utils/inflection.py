"""
String casing helpers.

Providers disagree on how they spell field names (``postalCode``,
``postal_code``, ``PostalCode``). These stateless functions translate between
the styles so adapters can map provider payloads onto Location fields.

Usage:
    from graticule.core.utils.inflection import camelize, underscore

    underscore("matchedAddress")     # "matched_address"
    camelize("postal_code")          # "PostalCode"
    camelize("postal_code", False)   # "postalCode"
    humanize("postal_code")          # "Postal code"
    titleize("x-men: the last stand")  # "X Men: The Last Stand"
"""

import re


def camelize(word: str, uppercase_first_letter: bool = True) -> str:
    """
    Convert an underscored word to CamelCase.

    Example:
        >>> camelize("active_record")
        'ActiveRecord'
        >>> camelize("active_record", uppercase_first_letter=False)
        'activeRecord'
    """
    if not word:
        return word
    camelized = re.sub(r"(?:^|_)(.)", lambda m: m.group(1).upper(), word)
    if uppercase_first_letter:
        return camelized
    return word[0] + camelized[1:]


def underscore(word: str) -> str:
    """
    Make an underscored, lowercase form from a CamelCase expression.

    Example:
        >>> underscore("matchedAddress")
        'matched_address'
        >>> underscore("HTTPResponseCode")
        'http_response_code'
    """
    word = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", word)
    word = re.sub(r"([a-z\d])([A-Z])", r"\1_\2", word)
    return word.replace("-", "_").lower()


def humanize(word: str) -> str:
    """
    Capitalize the first word, turn underscores into spaces and strip a
    trailing ``_id``.

    Example:
        >>> humanize("employee_salary")
        'Employee salary'
        >>> humanize("author_id")
        'Author'
    """
    word = re.sub(r"_id$", "", word)
    return word.replace("_", " ").capitalize()


def titleize(word: str) -> str:
    """
    Capitalize all the words for display.

    Example:
        >>> titleize("man from the boondocks")
        'Man From The Boondocks'
    """
    return re.sub(
        r"\b('?[a-z])",
        lambda m: m.group(1).capitalize(),
        humanize(underscore(word)),
    )
