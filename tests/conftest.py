"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session")
def project_root_dir():
    """Provide the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def sample_a_line():
    """Provide a sample A record for testing."""
    return "AXXXabc123FLIGHT:7"


@pytest.fixture
def sample_date_line():
    """Provide a sample date header for testing."""
    return "HFDTE170717"


@pytest.fixture
def sample_fix_line():
    """Provide a sample B record without extensions for testing."""
    return "B1200005213123N00012456EA0000000123"


@pytest.fixture
def sample_igc_lines():
    """Provide the lines of a complete IGC file for testing."""
    return [
        "AXXXabc123FLIGHT:7",
        "HFDTE170717",
        "HFFXA035",
        "HFPLTPILOTINCHARGE:John_Doe",
        "HFCM2CREW2:Jane Doe",
        "HFGTYGLIDERTYPE:ASW 28",
        "HFGIDGLIDERID:D_1234",
        "HFCIDCOMPETITIONID:XY",
        "HFCCLCOMPETITIONCLASS:Club",
        "HFFTYFRTYPE:LXNAV,LX8000",
        "HFRFWFIRMWAREVERSION:1.4",
        "HFRHWHARDWAREVERSION:2",
        "HFGPSRECEIVER:uBlox",
        "I023638FXA3941ENL",
        "B1200005213123N00012456EA0000000123035120",
        "LXNA some vendor record",
        "B1200045213150N00012500EA0050000456030800",
        "GABCDEF0123456789",
    ]


@pytest.fixture
def sample_igc_text(sample_igc_lines):
    """Provide a complete IGC file as text with CRLF line endings."""
    return "\r\n".join(sample_igc_lines) + "\r\n"


@pytest.fixture
def sample_igc_file(tmp_path, sample_igc_text):
    """Write the sample IGC file to a temporary directory."""
    path = tmp_path / "77hg7sd1.igc"
    path.write_text(sample_igc_text)
    return path


@pytest.fixture
def sample_invalid_line():
    """Provide an invalid B record for testing."""
    return "B12000X5213123N00012456EA0000000123"
