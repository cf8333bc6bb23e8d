"""Table view state - search, risk filter, sorting and pagination

The engine is stateless; the view state lives here and is passed in
explicitly by whoever renders the table.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from cashflow_risk.config import settings
from cashflow_risk.domain.models import ProcessedRecord, RiskTier

SORTABLE_COLUMNS = [
    "customer_id",
    "transaction_history",
    "affordability",
    "employment",
    "behavior",
    "combined_score",
    "risk_level",
    "decision",
]


@dataclass
class TableState:
    """What the user is currently looking at in the customer table"""

    search: str = ""
    risk_filter: Optional[RiskTier] = None  # None shows every risk level
    sort_column: Optional[str] = None
    sort_direction: str = "asc"
    page: int = 1
    items_per_page: int = field(default_factory=lambda: settings.items_per_page)

    def set_search(self, term: str) -> None:
        self.search = term
        self.page = 1

    def set_risk_filter(self, tier: Optional[RiskTier]) -> None:
        self.risk_filter = tier
        self.page = 1

    def toggle_sort(self, column: str) -> None:
        """Same column flips direction, a new column starts ascending"""
        if column not in SORTABLE_COLUMNS:
            raise ValueError(f"Cannot sort by {column!r}")
        if self.sort_column == column:
            self.sort_direction = "desc" if self.sort_direction == "asc" else "asc"
        else:
            self.sort_column = column
            self.sort_direction = "asc"

    def go_to(self, page: int) -> None:
        self.page = max(1, page)


@dataclass
class TablePage:
    rows: List[ProcessedRecord]
    total: int  # records after filtering
    start: int  # 1-based index of the first row shown, 0 when empty
    end: int
    page: int
    total_pages: int


@dataclass(frozen=True)
class PageButton:
    label: str
    page: Optional[int]
    active: bool = False
    disabled: bool = False


def _sort_key(column: str):
    def key(record: ProcessedRecord):
        value = getattr(record, column)
        if isinstance(value, str):
            return value.lower()
        return value

    return key


def filter_records(records: Sequence[ProcessedRecord], state: TableState) -> List[ProcessedRecord]:
    term = state.search.lower()
    filtered = [
        r
        for r in records
        if term in r.customer_id.lower()
        and (state.risk_filter is None or r.risk_level is state.risk_filter)
    ]
    if state.sort_column:
        filtered.sort(key=_sort_key(state.sort_column), reverse=state.sort_direction == "desc")
    return filtered


def apply_table_state(records: Sequence[ProcessedRecord], state: TableState) -> TablePage:
    """Filter, sort and slice out the current page"""
    filtered = filter_records(records, state)
    total = len(filtered)
    per_page = state.items_per_page
    total_pages = -(-total // per_page) if per_page > 0 else 0

    offset = (state.page - 1) * per_page
    rows = filtered[offset:offset + per_page]

    return TablePage(
        rows=rows,
        total=total,
        start=offset + 1 if rows else 0,
        end=min(offset + per_page, total) if rows else 0,
        page=state.page,
        total_pages=total_pages,
    )


def pagination_items(current: int, total_pages: int) -> List[PageButton]:
    """
    Previous/next buttons around the first page, the last page and
    current +/- 1, with an ellipsis at current +/- 2.
    """
    if total_pages <= 1:
        return []

    buttons = [PageButton("‹", current - 1, disabled=current == 1)]
    for page in range(1, total_pages + 1):
        if page == 1 or page == total_pages or current - 1 <= page <= current + 1:
            buttons.append(PageButton(str(page), page, active=page == current))
        elif page == current - 2 or page == current + 2:
            buttons.append(PageButton("...", None, disabled=True))
    buttons.append(PageButton("›", current + 1, disabled=current == total_pages))
    return buttons
