import logging

# =======================================================================================
# TARGET REGIONS
# =======================================================================================

# Arab countries (Maghreb excluded)
COUNTRY_CODES = [
    'sa', 'ae', 'eg', 'kw', 'qa', 'bh', 'om', 'iq', 'jo', 'lb', 'ps', 'sy', 'ye', 'sd'
]

# Kept from global category feeds next to the Arab countries
WESTERN_CODES = ['us', 'uk', 'ca']

# =======================================================================================
# SOURCES
# =======================================================================================

IPTV_ORG = "https://iptv-org.github.io/iptv"

COUNTRY_SOURCE = IPTV_ORG + "/countries/{code}.m3u"
LANGUAGE_SOURCE = IPTV_ORG + "/languages/ara.m3u"

# Fetched last, in this order
CATEGORY_SOURCES = [
    'news', 'kids', 'animation', 'sports', 'comedy', 'classic', 'documentary',
    'movies', 'series', 'family', 'lifestyle', 'auto', 'business', 'religious',
    'education',
]
CATEGORY_SOURCE = IPTV_ORG + "/categories/{category}.m3u"

# =======================================================================================
# FILTERS
# =======================================================================================

# Case-sensitive substrings of name or group
EXCLUDED_KEYWORDS = ['Rotana', 'Fann', 'Watar', 'Radio', 'Audio', 'FM', 'Test']

EXCLUDED_GROUPS = ['radio', 'audio']

# Lets a category-feed channel past the country gate
FORCE_INCLUDE = [
    'Maraya', 'Tash', 'Comedy', 'Classic', 'Zaman', 'Drama', 'Spacetoon', 'MBC', 'Cartoon'
]

# Substrings of the lowercased tvg-id
BLOCKED_REGIONS = [
    '.ir', '.cn', '.ru', '.in', '.pk', '.tr', '.vn', '.th', '.kr', '.jp', '.br', '.es',
    '.fr', '.it', '.de', '.pl', '.ua', '.id', '.il', '.et', '.er', '.so'
]

BLOCKED_NAME_KEYWORDS = ['iran', 'persian', 'al alam']

# A name containing the first keyword survives only with the second one
RESTRICTED_NAME = ('Iraqia', 'News')

# =======================================================================================
# RUNTIME
# =======================================================================================

OUTPUT_FILENAME = "playlist.m3u"
LOG_FILENAME = "iptv_arab.log"

FETCH_TIMEOUT = 20
STREAM_CHECK_TIMEOUT = 2.5
VALIDATE_BATCH_SIZE = 10

SERVER_PORT = 3000

REQUEST_HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
    "Accept": "*/*",
    "Accept-Language": "ar,en-US;q=0.9,en;q=0.8",
}

# Player-like client for liveness probes
PLAYER_USER_AGENT = "VLC/3.0.18 LibVLC/3.0.18"


def setup_logging(log_file=LOG_FILENAME):
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(log_file, encoding='utf-8', mode='w')
        ]
    )
