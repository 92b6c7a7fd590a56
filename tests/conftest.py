import json
import logging

import pytest

from revision_diff.models import DiffKind, HighlightKind


@pytest.fixture
def compare_payload() -> dict:
    """A compare response shaped like the REST endpoint output."""
    return {
        "from": {"id": 1001, "slot_role": "main", "sections": []},
        "to": {"id": 1002, "slot_role": "main", "sections": []},
        "diff": [
            {
                "type": DiffKind.LINE_WITH_SAME_CONTENT,
                "lineNumber": 1,
                "text": "Intro paragraph.",
                "offset": {"from": 0, "to": 0},
                "highlightRanges": [],
            },
            {
                "type": DiffKind.LINE_ADDED,
                "lineNumber": 2,
                "text": "New line",
                "offset": {"from": None, "to": 17},
                "highlightRanges": [],
            },
            {
                "type": DiffKind.LINE_WITH_DIFF,
                "lineNumber": 3,
                "text": "Café au lait",
                "offset": {"from": 26, "to": 26},
                "highlightRanges": [
                    {"start": 0, "length": 5, "type": HighlightKind.ADDITION},
                    {"start": 6, "length": 3, "type": HighlightKind.REMOVAL},
                ],
            },
        ],
    }


@pytest.fixture
def payload_file(tmp_path, compare_payload):
    path = tmp_path / "compare.json"
    path.write_text(json.dumps(compare_payload), encoding="utf-8")
    return path


@pytest.fixture
def restore_root_logger():
    """Undo handler and level changes made by configure_logging()."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield root_logger
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
