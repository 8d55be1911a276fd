"""Central configuration for MRZ reading and document framing.

All tunable parameters are defined here with descriptive names.
These values can be adjusted to fine-tune how eagerly a scan is accepted.
"""

# =============================================================================
# MRZ LINE CLASSIFICATION
# =============================================================================

# Length bounds (inclusive) for an OCR line to be considered an MRZ line.
# TD1 lines are 30 characters, TD3 lines are 44; OCR often drops a few
# trailing fillers, so the lower bound is looser than 30.
MIN_MRZ_LINE_LENGTH = 25
MAX_MRZ_LINE_LENGTH = 44

# =============================================================================
# MRZ RECORDS
# =============================================================================

# Fixed line widths per ICAO 9303 layout
TD1_LINE_LENGTH = 30
TD3_LINE_LENGTH = 44

# Minimum number of lines needed to parse a record
TD1_LINE_COUNT = 3
TD3_LINE_COUNT = 2

# Filler character used for padding and as field separator
MRZ_FILLER = "<"

# Two-digit years at or below this pivot are 20YY, above it 19YY
CENTURY_PIVOT_YEAR = 30

# Issuing country a record must carry to be considered valid
EXPECTED_COUNTRY_CODE = "UZB"

# Sex codes accepted by the validity check ("X" and "<" are readable but invalid)
VALID_SEX_CODES = ("M", "F")

# Document type a passport record must carry to be considered valid
PASSPORT_DOCUMENT_TYPE = "P"

# ICAO 9303 check-digit weights, applied cyclically
CHECK_DIGIT_WEIGHTS = (7, 3, 1)

# =============================================================================
# DOCUMENT FRAMING
# =============================================================================

# Maximum tilt of the document's top edge, in degrees
MAX_TILT_ANGLE = 15.0

# Relative difference allowed between the observed and mask aspect ratios
ASPECT_RATIO_TOLERANCE = 0.2

# Relative difference allowed between observed and mask width/height
SIZE_TOLERANCE = 0.2

# =============================================================================
# MASK LAYOUT
# =============================================================================

# Mask aspect ratios (width / height) per document outline
ID_CARD_MASK_ASPECT_RATIO = 375 / 240
PASSPORT_MASK_ASPECT_RATIO = 375 / 528

# Horizontal margin between the view edge and the mask, in points
MASK_HORIZONTAL_MARGIN = 16.0

# =============================================================================
# LOGGING
# =============================================================================

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
