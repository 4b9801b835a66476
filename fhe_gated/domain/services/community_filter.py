"""Community browsing filters.

Search matches case-insensitively against name and description. The
"yours" tab keeps communities whose gating contract equals the connected
account.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from fhe_gated.domain.models.community import CommunityRecord


class CommunityTab(Enum):
    """Browsing tabs."""

    ALL = "all"
    YOURS = "yours"


@dataclass(frozen=True)
class CommunityStats:
    """Summary shown above the community listing.

    Attributes:
        total: Number of communities in the registry.
    """

    total: int


def matches_search(record: CommunityRecord, search_term: str) -> bool:
    term = search_term.lower()
    return term in record.name.lower() or term in record.description.lower()


def matches_tab(record: CommunityRecord, tab: CommunityTab, account: str) -> bool:
    if tab is CommunityTab.ALL:
        return True
    if not account:
        return False
    return record.nft_contract.lower() == account.lower()


def filter_communities(
    records: Iterable[CommunityRecord],
    search_term: str = "",
    tab: CommunityTab = CommunityTab.ALL,
    account: str = "",
) -> list[CommunityRecord]:
    """Filter communities by search term and tab, preserving order.

    Args:
        records: Communities in display order.
        search_term: Case-insensitive substring; empty matches everything.
        tab: ALL or YOURS.
        account: Connected wallet account, used by the YOURS tab.

    Returns:
        Matching communities in their original order.
    """
    return [
        record
        for record in records
        if matches_search(record, search_term) and matches_tab(record, tab, account)
    ]


def summarize(records: Iterable[CommunityRecord]) -> CommunityStats:
    """Compute listing statistics."""
    return CommunityStats(total=sum(1 for _ in records))
