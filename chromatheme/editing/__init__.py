# Copyright (c) 2026 Chromatheme
# SPDX-License-Identifier: MIT

"""
Editing layer: numeric field models and the session object that routes
edits into the document history.
"""

from chromatheme.editing.numeric import (
    QUANTITY_DOMAINS,
    Domain,
    NumericInputModel,
    Quantity,
    clamp_value,
    format_number,
    is_partial_number,
    parse_number,
    round_to_precision,
    step_increment,
)
from chromatheme.editing.session import EditorSession

__all__ = [
    # Numeric input
    "NumericInputModel",
    "Quantity",
    "Domain",
    "QUANTITY_DOMAINS",
    "clamp_value",
    "format_number",
    "is_partial_number",
    "parse_number",
    "round_to_precision",
    "step_increment",
    # Session
    "EditorSession",
]
