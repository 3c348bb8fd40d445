"""Card name normalization shared by the import and prune comparisons."""

SPLIT_SEPARATOR = " // "


def fold_name(name: str) -> str:
    """Trim and case-fold a name for case-insensitive lookups."""
    return name.strip().casefold()


def upper_name(value: str | None) -> str | None:
    """Trim and uppercase a name or expansion, keeping None as None."""
    if value is None:
        return None
    return value.strip().upper()


def is_split_face(face: str, composite: str) -> bool:
    """
    Check whether `face` is one side of a split or double-faced name.

    "Fire" is a face of "Fire // Ice" and "Ice" is too. Comparison is
    case-insensitive; the composite is never parsed into separate faces.
    """
    folded_face = face.casefold()
    folded_composite = composite.casefold()
    return (
        f"{folded_face}{SPLIT_SEPARATOR}" in folded_composite
        or f"{SPLIT_SEPARATOR}{folded_face}" in folded_composite
    )
