from typing import Tuple

from cube_errors import CubeInputError
from cubie_cube import VERIFY_MESSAGES, VerifyStatus
from face_cube import FaceCube


def verify_facelets(facelets: str) -> VerifyStatus:
    """Verification status of a canonical facelet string (parse errors propagate)."""
    return FaceCube(facelets).to_cubie_cube().verify()


def validate_facelets(facelets: str) -> Tuple[bool, str]:
    """(ok, message) for a canonical facelet string; never raises for bad input."""
    try:
        status = verify_facelets(facelets)
    except CubeInputError as e:
        return False, str(e)
    return status == VerifyStatus.OK, VERIFY_MESSAGES[status]
