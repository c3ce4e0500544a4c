#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2mdx/plugins/table_alignment.py
"""Table alignment pass: turn an Org alignment cookie row into column alignments.

Org writes column alignment as a row of ``<l>``, ``<c>`` and ``<r>``
cookies. When the third row of a table (separator rows included) consists
of cookies only, the row is removed and the alignments are recorded for the
table's ordinal. The table pass on the HTML tree applies them to the header
cells.

    | Name | Age |
    |------+-----|
    | <l>  | <r> |
    | Bob  | 42  |

"""

from __future__ import annotations

import logging

from org2mdx.ast import NodeTransformer, Table, TableRow, extract_text
from org2mdx.constants import TABLE_ALIGNMENT_TOKENS
from org2mdx.plugins.context import PluginContext, TableAlignmentRecord

logger = logging.getLogger(__name__)

_ALIGNMENT_ROW = 2


def _cell_texts(row: TableRow) -> list[str]:
    return [extract_text(cell.content, joiner="").strip() for cell in row.cells]


def _is_rule(row: TableRow) -> bool:
    return bool(row.metadata.get("org_rule"))


class TableAlignmentTransform(NodeTransformer):
    """Extract alignment cookie rows into the Plugin Context.

    Parameters
    ----------
    context : PluginContext
        Context receiving the alignment records

    """

    def __init__(self, context: PluginContext):
        self.context = context
        self._table_count = 0

    def visit_table(self, node: Table) -> Table:
        """Record and remove the alignment row of a table, if it has one."""
        index = self._table_count
        self._table_count += 1
        table = super().visit_table(node)
        rows = list(table.rows)

        if len(rows) <= _ALIGNMENT_ROW or _is_rule(rows[_ALIGNMENT_ROW]):
            return table
        tokens = _cell_texts(rows[_ALIGNMENT_ROW])
        if not tokens or not all(token in TABLE_ALIGNMENT_TOKENS for token in tokens):
            return table

        alignments = tuple(TABLE_ALIGNMENT_TOKENS[token] for token in tokens)
        self.context.table_alignments.append(TableAlignmentRecord(index=index, alignments=alignments))
        logger.debug("Recorded alignments %s for table %d", alignments, index)
        del rows[_ALIGNMENT_ROW]

        # An empty first row leaves room for the first data row
        if not any(_cell_texts(rows[0])):
            for position in range(1, len(rows)):
                if not _is_rule(rows[position]):
                    rows[0] = rows.pop(position)
                    break

        return Table(rows=rows, header=table.header, alignments=table.alignments, metadata=table.metadata)
