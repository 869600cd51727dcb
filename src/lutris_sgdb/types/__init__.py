"""Type definitions for lutris-sgdb."""

from lutris_sgdb.types.common import AssetCategory, CandidateImage
from lutris_sgdb.types.steamgriddb import SGDBDimension, SGDBMime, SGDBType

__all__ = [
    "AssetCategory",
    "CandidateImage",
    "SGDBDimension",
    "SGDBMime",
    "SGDBType",
]
