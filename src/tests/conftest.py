import logging

import pandas as pd
import pytest

from hijri_convert import logging_setup


@pytest.fixture(autouse=True)
def isolate_root_logging():
    """Put the root logger back the way it was after setup_logging() replaced its handlers."""
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    configured = logging_setup._configured
    yield
    for h in list(root.handlers):
        if h not in before:
            root.removeHandler(h)
            h.close()
    for h in before:
        root.addHandler(h)  # no-op when still attached
    root.setLevel(level)
    logging_setup._configured = configured


@pytest.fixture
def gregorian_frame():
    return pd.DataFrame(
        {
            "id": [1, 2, 3, 4],
            "created": ["2000-01-01", "1700-01-01", None, "bad-date!!"],
        }
    )


# Known conversions produced by the tabular arithmetic.
@pytest.fixture(scope="session")
def reference_pairs():
    return [
        ("2000-01-01", "1420-09-24"),
        ("2023-08-20", "1445-02-03"),
        ("2023-08-21", "1445-02-04"),
        ("2023-08-18", "1445-02-01"),
    ]
