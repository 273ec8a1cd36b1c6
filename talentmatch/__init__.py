"""
TalentMatch - skill and experience based candidate ranking.

Submodules:
- core: Matching engine, result selection and statistics
- data: Pydantic models and input decoding
- utils: Configuration, logging and constants
"""

from talentmatch.utils.constants import APP_NAME as __app_name__
from talentmatch.utils.constants import VERSION as __version__

__all__ = ["__app_name__", "__version__"]
