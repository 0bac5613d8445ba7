import pytest

from cube_config import FACES_INIT_STATE
from cube_errors import MalformedLengthError
from cube_status import validate_facelets, verify_facelets
from cube_trace import apply_all
from cubie_cube import VERIFY_MESSAGES, VerifyStatus

SOLVED = FACES_INIT_STATE


def test_reachable_cube_is_ok():
    s = apply_all(SOLVED, ["R", "U", "F2", "D'"])
    assert verify_facelets(s) == VerifyStatus.OK
    assert validate_facelets(s) == (True, "Cube OK")


def test_parity_error_message():
    # UR and UF edges exchanged
    s = SOLVED[:10] + "F" + SOLVED[11:19] + "R" + SOLVED[20:]
    assert verify_facelets(s) == VerifyStatus.PARITY_ERROR
    assert validate_facelets(s) == (False, VERIFY_MESSAGES[VerifyStatus.PARITY_ERROR])


def test_bad_string_is_reported_not_raised():
    ok, message = validate_facelets(SOLVED[:53])
    assert not ok
    assert "54" in message


def test_verify_facelets_raises_parse_errors():
    with pytest.raises(MalformedLengthError):
        verify_facelets(SOLVED[:53])
