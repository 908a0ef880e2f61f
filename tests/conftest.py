import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import packet_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


SAMPLE_PACKET_TOML = '''
title = "Spring Contest"
preamble = "Read **all** problems before starting."

[[problems]]
title = "Add"
description = "Print the sum of *two* integers."

[[problems.tests]]
input = "1 2\\n"
output = "3\\n"
visible = true

[[problems.tests]]
input = "5 5\\n"
output = "10\\n"
visible = false

[[problems.tests]]
input = "-1 1\\n"
output = "0\\n"
visible = true

[[problems]]
title = "Hello"

[[problems.tests]]
input = ""
output = "hello\\n"
visible = true
'''


# Common test fixtures
@pytest.fixture
def sample_packet_toml() -> str:
    """Return packet TOML with two problems and one hidden test."""
    return SAMPLE_PACKET_TOML


@pytest.fixture
def sample_packet_path(tmp_path: Path) -> Path:
    """Write the sample packet to a temporary file."""
    path = tmp_path / "packet.toml"
    path.write_text(SAMPLE_PACKET_TOML, encoding="utf-8")
    return path


@pytest.fixture
def sample_packet():
    """Create the sample packet as models."""
    from packet_toolkit.core.models import Packet, Problem, TestCase

    return Packet(
        title="Spring Contest",
        preamble="Read **all** problems before starting.",
        problems=(
            Problem(
                title="Add",
                description="Print the sum of *two* integers.",
                tests=(
                    TestCase("1 2\n", "3\n", True),
                    TestCase("5 5\n", "10\n", False),
                    TestCase("-1 1\n", "0\n", True),
                ),
            ),
            Problem(
                title="Hello",
                tests=(TestCase("", "hello\n", True),),
            ),
        ),
    )
