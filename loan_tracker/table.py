"""
Generic record table for the Loan Tracker views.
"""

import html
from dataclasses import dataclass, field
from typing import Any, Callable, List, Mapping, Optional, Sequence

import streamlit as st

CellRenderer = Callable[[Any, Mapping[str, Any]], Any]


@dataclass(frozen=True)
class Column:
    """One table column: record field, header label, optional cell formatter."""
    key: str
    label: str
    render: Optional[CellRenderer] = None


@dataclass
class TableModel:
    headers: List[str]
    rows: List[List[str]] = field(default_factory=list)
    placeholder: bool = False

    @property
    def width(self) -> int:
        return len(self.headers)


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def build_table(rows: Sequence[Mapping[str, Any]], columns: Sequence[Column], empty: str) -> TableModel:
    """Lay out records as rows of cell strings.

    With no records the body is a single placeholder row carrying ``empty``.
    """
    model = TableModel(headers=[c.label for c in columns])
    if not rows:
        model.rows.append([empty])
        model.placeholder = True
        return model

    for record in rows:
        cells = []
        for column in columns:
            value = record.get(column.key)
            if column.render is not None:
                value = column.render(value, record)
            cells.append(_cell_text(value))
        model.rows.append(cells)
    return model


def render_table_html(model: TableModel) -> str:
    """Produce the escaped HTML markup for a table model."""
    head = "".join(f"<th>{html.escape(h)}</th>" for h in model.headers)

    if model.placeholder:
        body = (
            f'<tr><td class="empty" colspan="{model.width}">'
            f"{html.escape(model.rows[0][0])}</td></tr>"
        )
    else:
        body = "".join(
            "<tr>" + "".join(f"<td>{html.escape(cell)}</td>" for cell in row) + "</tr>"
            for row in model.rows
        )

    return (
        '<div style="overflow-x: auto;"><table class="data-table">'
        f"<thead><tr>{head}</tr></thead><tbody>{body}</tbody></table></div>"
    )


def render_table(rows: Sequence[Mapping[str, Any]], columns: Sequence[Column], empty: str) -> None:
    """Draw a record table in the current Streamlit container."""
    st.markdown(render_table_html(build_table(rows, columns, empty)), unsafe_allow_html=True)
