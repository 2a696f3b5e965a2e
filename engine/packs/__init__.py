"""Content packs for the four quiz games."""

from ..content import ContentPack
from . import geography, history, science, vocabulary

PACKS = {
    pack.key: pack
    for pack in (geography.PACK, history.PACK, science.PACK, vocabulary.PACK)
}


def get_pack(key: str) -> ContentPack:
    """Return a pack by key. Raises KeyError for unknown keys."""
    return PACKS[key]


def list_packs() -> list[ContentPack]:
    return list(PACKS.values())


__all__ = ['PACKS', 'get_pack', 'list_packs']
