"""
I/O Readers

Reads node lists from tab-separated files.
"""

from __future__ import annotations
from typing import Any, List, Optional
from pathlib import Path
import logging

import pandas as pd

from ..exceptions import InvalidInputError
from ..types import IconRef, Node

logger = logging.getLogger(__name__)


class NodeReader:
    """
    Reads nodes from TSV

    Columns:
        text (required), offset, active_icon, inactive_icon
    Empty cells fall back to the Node defaults.
    """

    REQUIRED_COLUMNS = ['text']
    OPTIONAL_COLUMNS = ['offset', 'active_icon', 'inactive_icon']

    @staticmethod
    def _icon(value: Any) -> Optional[IconRef]:
        if pd.isna(value):
            return None
        text = str(value).strip()
        if not text:
            return None
        # Numeric refs stay integers so they match integer loader keys
        return int(text) if text.lstrip('-').isdigit() else text

    @classmethod
    def load_nodes(cls, nodes_file: str) -> List[Node]:
        """
        Load nodes in file order

        Args:
            nodes_file: Path to TSV file

        Returns:
            List of Node

        Raises:
            FileNotFoundError: if the file does not exist
            InvalidInputError: if the text column is missing or offsets are not integers
        """
        if not Path(nodes_file).exists():
            raise FileNotFoundError(f"Nodes file not found: {nodes_file}")

        table = pd.read_csv(nodes_file, sep='\t', dtype=str, keep_default_na=False,
                            na_values=[''])
        table.columns = [c.strip() for c in table.columns]

        missing = [c for c in cls.REQUIRED_COLUMNS if c not in table.columns]
        if missing:
            raise InvalidInputError(f"{nodes_file}: missing columns {missing}")
        for col in cls.OPTIONAL_COLUMNS:
            if col not in table.columns:
                table[col] = None

        offsets = pd.to_numeric(table['offset'].fillna(0), errors='coerce')
        if offsets.isna().any() or (offsets % 1 != 0).any():
            bad = table.loc[offsets.isna() | (offsets % 1 != 0), 'offset'].tolist()
            raise InvalidInputError(f"{nodes_file}: offsets must be integers, got {bad}")

        nodes = [
            Node(
                text='' if pd.isna(row['text']) else str(row['text']),
                offset=int(offset),
                active_icon=cls._icon(row['active_icon']),
                inactive_icon=cls._icon(row['inactive_icon'])
            )
            for (_, row), offset in zip(table.iterrows(), offsets)
        ]
        logger.debug(f"Read {len(nodes)} nodes from {nodes_file}")
        return nodes


def read_nodes(nodes_file: str) -> List[Node]:
    """Convenience function to read nodes"""
    return NodeReader.load_nodes(nodes_file)
