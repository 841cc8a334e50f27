# src/rebrand/core/variants.py
from rebrand.errors import EmptyTokenSequenceError
from rebrand.models import VariantSet
from rebrand.utils.tokenizer import tokenize


def capitalize(word: str) -> str:
    """Upper-cases the first character and lower-cases the rest ("ID" -> "Id")."""
    if not word:
        return word
    return word[0].upper() + word[1:].lower()


def build_variants(name: str) -> VariantSet:
    """Derives every casing variant of `name`."""
    tokens = tokenize(name)
    if not tokens:
        raise EmptyTokenSequenceError(f"Unable to derive tokens from name {name!r}")

    capitalized = [capitalize(token) for token in tokens]
    upper = [token.upper() for token in tokens]

    return VariantSet(
        original=name,
        tokens=tokens,
        title_case=" ".join(capitalized),
        pascal_case="".join(capitalized),
        camel_case=tokens[0] + "".join(capitalized[1:]),
        kebab_case="-".join(tokens),
        snake_case="_".join(tokens),
        upper_snake_case="_".join(upper),
        upper_flat="".join(upper),
        flat_lower="".join(tokens),
    )
