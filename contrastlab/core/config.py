#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Max size for conversion cache
LRU_CACHE_SIZE = 4096

EPS = 1e-12                        # Floating-point precision and division-by-zero safety

# Relative Luminance Coefficients (Source: ITU-R BT.709 / WCAG 2.1)
LUMA_R = 0.2126                    # Red component contribution to relative luminance
LUMA_G = 0.7152                    # Green component contribution to relative luminance
LUMA_B = 0.0722                    # Blue component contribution to relative luminance

# APCA Luminance Coefficients (Source: APCA reference implementation, sRGB)
APCA_LUMA_R = 0.2126729            # Red contribution to APCA screen luminance
APCA_LUMA_G = 0.7151522            # Green contribution to APCA screen luminance
APCA_LUMA_B = 0.0721750            # Blue contribution to APCA screen luminance

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255.0                    # 8-bit color depth limit
HUE_MAX = 360.0                    # Full circle degrees
HUE_SECTOR = 60.0                  # Degrees per HSL sector
HSL_HUE_MOD = 6.0                  # Hue sector divisor for HSL
PERCENT = 100.0                    # Scale of HSL saturation/lightness and CIE L*
EXP_2 = 2                          # Square power
EXP_7 = 7                          # Power for CIEDE2000 chroma calculation

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB
LINEAR_TO_SRGB_TH = 0.0031308      # Threshold for switching from linear to sRGB space

# XYZ D65 Reference White (Source: ASTM E308-01 / CIE D65)
D65_X = 95.047                     # X coordinate for D65 illuminant (2-degree observer)
D65_Y = 100.0                      # Y coordinate (Luminance) for D65 illuminant
D65_Z = 108.883                    # Z coordinate for D65 illuminant
XYZ_SCALING = 100.0                # XYZ values are reported on a 0-100 scale

# sRGB to XYZ Matrix (Source: sRGB D65)
M_SRGB_XYZ_X = (0.4124564, 0.3575761, 0.1804375)  # Coefficients for X coordinate calculation
M_SRGB_XYZ_Y = (0.2126729, 0.7151522, 0.0721750)  # Coefficients for Y (Luminance) calculation
M_SRGB_XYZ_Z = (0.0193339, 0.1191920, 0.9503041)  # Coefficients for Z coordinate calculation

# XYZ to sRGB Matrix (Source: sRGB D65 inverse)
M_XYZ_SRGB_R = (3.2404542, -1.5371385, -0.4985314)  # Coefficients for linear Red component calculation
M_XYZ_SRGB_G = (-0.9692660, 1.8760108, 0.0415560)   # Coefficients for linear Green component calculation
M_XYZ_SRGB_B = (0.0556434, -0.2040259, 1.0572252)   # Coefficients for linear Blue component calculation

# CIELAB Constants (Source: CIE 15:2004)
LAB_E = 0.008856                   # Threshold for switching between linear and power functions
LAB_K = 7.787                      # Slope of the linear segment for low luminance values
LAB_POW = 1.0 / 3.0                # Cube root exponent of the f(t) transform
LAB_OFFSET = 16.0 / 116.0          # Constant offset for normalization in XYZ to Lab conversion
LAB_L_MULT = 116.0                 # Multiplier for Lightness (L*) calculation
LAB_L_SUB = 16.0                   # Subtraction constant for Lightness (L*) calculation
LAB_A_MULT = 500.0                 # Multiplier for 'a*' (green-red) channel calculation
LAB_B_MULT = 200.0                 # Multiplier for 'b*' (blue-yellow) channel calculation
LAB_INV_THR = 0.20689655           # Threshold for inverse conversion (Lab to XYZ)

# CIE L* <-> relative luminance (Source: CIE 15:2004, exact rational form)
LSTAR_EPSILON = 216.0 / 24389.0    # Luminance breakpoint between the linear and cube-root segments
LSTAR_KAPPA = 24389.0 / 27.0       # Slope of the linear segment (about 903.3)
LSTAR_BREAK = 8.0                  # L* value at the breakpoint

# CIE94 Constants (Source: CIE 116-1995, graphic arts weighting)
CIE94_K1 = 0.045                   # Chroma weighting coefficient for S_C
CIE94_K2 = 0.015                   # Hue weighting coefficient for S_H
CIE94_K_FACTORS = (1.0, 1.0, 1.0)  # Parametric weighting factors (k_L, k_C, k_H)

# CIEDE2000 Constants (Source: Sharma, G., Wu, W., & Dalal, E. N. (2005))
POW7_25 = 6103515625.0             # Constant for chroma normalization (25^7)
G_FACTOR = 0.5                     # Axial adjustment factor for neutral gray
T_K1 = 0.17                        # First T-factor coefficient for hue weighting
T_K2 = 0.24                        # Second T-factor coefficient for hue weighting
T_K3 = 0.32                        # Third T-factor coefficient for hue weighting
T_K4 = 0.20                        # Fourth T-factor coefficient for hue weighting
T_OFFSET_1 = 30.0                  # Primary phase offset for hue angle T-factor
T_OFFSET_2 = 6.0                   # Secondary phase offset for hue angle T-factor
T_OFFSET_3 = 63.0                  # Tertiary phase offset for hue angle T-factor
T_MUL_3 = 3.0                      # Multiplier for tertiary hue angle calculation
T_MUL_4 = 4.0                      # Multiplier for quaternary hue angle calculation
L_OFFSET = 50.0                    # Lightness midpoint for S_L weighting function
S_L_K = 0.015                      # Lightness weighting coefficient for S_L
S_C_K = 0.045                      # Chroma weighting coefficient for S_C
S_L_DIV = 20.0                     # Divisor term for S_L weighting calculation
RT_D30 = 30.0                      # Degree factor for rotation term (R_T) calculation
RT_H_OFFSET = 275.0                # Hue offset for blue region in R_T calculation
RT_DIV = 25.0                      # Hue divisor for blue region in R_T calculation
DEG_180 = 180.0                    # Half turn, shortest-path hue difference bound
DEG_360 = 360.0                    # Full turn
K_FACTORS = (1.0, 1.0, 1.0)        # Parametric weighting factors (k_L, k_C, k_H)

# ==========================================
# Contrast Constants
# ==========================================

# WCAG Contrast Thresholds (Source: https://www.w3.org/TR/WCAG21/#contrast-minimum)
WCAG_AA_LARGE = 3.0                # Minimum contrast for large text (Level AA)
WCAG_AA_NORMAL = 4.5               # Minimum contrast for normal text (Level AA)
WCAG_AAA_LARGE = 4.5               # Enhanced contrast for large text (Level AAA)
WCAG_AAA_NORMAL = 7.0              # Enhanced contrast for normal text (Level AAA)
WCAG_UI_COMPONENTS = 3.0           # Non-text contrast for UI components (SC 1.4.11)
WCAG_MIN_RATIO = 1.0               # Lower bound for WCAG calculation
WCAG_MAX_RATIO = 21.0              # Upper bound for WCAG calculation (Black on White)
WCAG_LUMINANCE_OFFSET = 0.05       # Standard offset constant in the (L + 0.05) contrast formula
WCAG_RATIO_DECIMALS = 2            # Reported precision of the contrast ratio
LUMINANCE_DECIMALS = 4             # Reported precision of luminance values

# Contrast grade buckets, checked top to bottom
GRADE_BUCKETS = (
    (12.0, "A+"),
    (7.0, "A"),
    (4.5, "B"),
    (3.0, "C"),
    (2.0, "D"),
)
GRADE_FAIL = "F"

# APCA Constants (Source: APCA-W3 0.0.98G-4g, frozen revision)
APCA_BLK_THRS = 0.022              # Soft black clamp threshold
APCA_BLK_CLMP = 1.414              # Soft black clamp exponent
APCA_DELTA_Y_MIN = 0.0005          # Luminance differences below this are no contrast
APCA_NORM_BG = 0.56                # Background exponent, dark text on light background
APCA_NORM_TXT = 0.57               # Text exponent, dark text on light background
APCA_REV_BG = 0.65                 # Background exponent, light text on dark background
APCA_REV_TXT = 0.62                # Text exponent, light text on dark background
APCA_SCALE = 1.14                  # Output scale of the raw SAPC value
APCA_LO_CLIP = 0.1                 # Raw contrast below this is clipped to zero
APCA_LO_OFFSET = 0.027             # Offset pulled from the raw contrast toward zero
APCA_OUTPUT_SCALE = 100.0          # Lc is reported on a 0-108 scale
APCA_DECIMALS = 1                  # Reported precision of Lc
APCA_BODY_TEXT_LC = 75.0           # Minimum |Lc| for body text

# Minimum font size (px) by |Lc|, checked top to bottom
APCA_FONT_SIZES = (
    (90.0, 12),
    (75.0, 16),
    (60.0, 20),
    (45.0, 32),                    # Large text only
)

# ==========================================
# Color Vision Deficiency Simulation
# ==========================================

# Dichromat matrices (Source: Viénot, Brettel & Mollon, 1999 simplified form)
CB_MATRICES = {
    "protanopia": (
        (0.56667, 0.43333, 0.0),      # Transformation for Red-blindness (L-cone deficiency)
        (0.55833, 0.44167, 0.0),      # Mapping spectral sensitivity to remaining cones
        (0.0, 0.24167, 0.75833),      # Final Z-axis adjustment for Protan simulation
    ),
    "deuteranopia": (
        (0.625, 0.375, 0.0),          # Transformation for Green-blindness (M-cone deficiency)
        (0.70, 0.30, 0.0),            # Mapping spectral sensitivity to remaining cones
        (0.0, 0.30, 0.70),            # Final Z-axis adjustment for Deutan simulation
    ),
    "tritanopia": (
        (0.95, 0.05, 0.0),            # Transformation for Blue-blindness (S-cone deficiency)
        (0.0, 0.43333, 0.56667),      # Mapping spectral sensitivity to remaining cones
        (0.0, 0.475, 0.525),          # Final Z-axis adjustment for Tritan simulation
    ),
    "achromatopsia": (
        (0.299, 0.587, 0.114),        # Rec.601 luma replicated on every output channel
        (0.299, 0.587, 0.114),
        (0.299, 0.587, 0.114),
    ),
}

# Default severity of anomalous trichromacy (typical clinical presentation)
SEVERITY_RED_GREEN_WEAK = 0.6      # Protanomaly and deuteranomaly
SEVERITY_BLUE_WEAK = 0.6           # Tritanomaly
SEVERITY_BLUE_CONE = 0.8           # Achromatomaly (blue cone monochromacy)
SEVERITY_MIN = 0.0
SEVERITY_MAX = 1.0

DISTINGUISHABLE_RGB_THRESHOLD = 30.0  # Euclidean RGB distance for distinguishable colors

# ==========================================
# Optimizer Constants
# ==========================================

LIGHTNESS_SEARCH_ITERATIONS = 20   # Hard ceiling of the LCH lightness binary search
LIGHTNESS_SEARCH_WIDTH = 0.1       # Bracket width at which the search stops

HSL_STEP_RANGE = (5, 95, 5)        # Lighten/darken percentages (start, stop inclusive, step)
LCH_LIGHTNESS_RANGE = (0, 100, 5)  # LCH lightness sweep
HUE_ROTATION_RANGE = (-180, 180, 15)  # LCH hue rotation sweep, 0 skipped
CHROMA_RANGE = (0, 150, 10)        # LCH chroma sweep

DEFAULT_SUGGESTION_COUNT = 10      # Suggestions returned when no count is requested
DEFAULT_TARGET_RATIO = 4.5         # Palette optimization target
CAN_BE_ACCESSIBLE_MAX_DISTANCE = 50.0  # ΔE2000 budget of can_be_accessible

SCORE_PASS_BASE = 80.0             # Score awarded for exactly meeting the target
SCORE_BONUS_MAX = 20.0             # Extra score for exceeding the target by 100% or more
SCORE_MAX = 100.0

COMPLEMENT_GRAY_LEVEL = 128        # Mid gray candidate of the complementary search
COMPLEMENT_LIGHTNESS_RANGE = (0, 100, 5)  # Grayscale LCH lightness sweep

# ==========================================
# Application Logic & Constraints
# ==========================================

MAX_DEC = 16777215                 # Max integer value for 24-bit Hex (0xFFFFFF)
MAX_COUNT = 100                    # Maximum number of colors allowed in batch processing
MAX_SUGGESTIONS = 250              # Upper bound of the suggestion count CLI option

# Keys of the 'convert' command
FORMAT_KEYS = ["hex", "rgb", "hsl", "xyz", "lab", "lch"]

# Keys of the 'vision' command, same order as ColorBlindnessType
SIMULATE_KEYS = [
    "protanopia",
    "deuteranopia",
    "tritanopia",
    "achromatopsia",
    "protanomaly",
    "deuteranomaly",
    "tritanomaly",
    "achromatomaly",
]

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
