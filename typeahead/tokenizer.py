"""
Tokenization for typeahead.

Corpus entries are split into case-folded alphanumeric tokens that form the
correction vocabulary. Any run of non-alphanumeric characters ends the
current token.

Functions:
    as_text(value) -> str: Adapt a string-like value to str
    get_folding(policy) -> Callable: Resolve a case-folding policy
    tokenize(text, fold) -> List[str]: Extract tokens from text

Examples:
    >>> tokenize("first, item")
    ['first', 'item']

    >>> tokenize("...Fourth...element", fold=get_folding("identity"))
    ['Fourth', 'element']
"""

import re
from typing import Callable, Dict, List, Union

# ASCII only, same as the C locale isalnum()
TOKEN_PATTERN = re.compile(r'[A-Za-z0-9]+')

FOLDING_POLICIES: Dict[str, Callable[[str], str]] = {
    'lower': str.lower,
    'identity': lambda token: token,
}

DEFAULT_FOLDING = 'lower'

StringLike = Union[str, bytes, bytearray, memoryview]


def as_text(value: StringLike) -> str:
    """
    Adapt a string-like value to str at the library boundary.

    Args:
        value: str, or an ASCII bytes-like object

    Returns:
        The value as str

    Raises:
        TypeError: If value is not string-like
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode('ascii')
    raise TypeError(f"expected a string-like value, got {type(value).__name__}")


def get_folding(policy: str = DEFAULT_FOLDING) -> Callable[[str], str]:
    """
    Resolve a case-folding policy name to a function.

    Args:
        policy: "lower" or "identity"

    Returns:
        Function applied to every token
    """
    try:
        return FOLDING_POLICIES[policy]
    except KeyError:
        raise ValueError(f"unknown case folding policy: {policy!r}") from None


def tokenize(text: StringLike, fold: Callable[[str], str] = str.lower) -> List[str]:
    """
    Extract alphanumeric tokens from text.

    Args:
        text: Text to tokenize
        fold: Case-folding function applied to each token

    Returns:
        Tokens in order of appearance, duplicates kept
    """
    return [fold(token) for token in TOKEN_PATTERN.findall(as_text(text))]
