"""
Constants
Compiled-in identifiers for the application whose builds are shown.
"""
FENNEC_APP_ID = "57bf25c0f096bc01001e21e0"
APPLICATION_NAME = "Fennec"
BUDDYBUILD_API_URL = "https://api.buddybuild.com"
BUILDS_LIMIT = 100
TICK_SECONDS = 15
DEFAULT_TIMEOUT = 30.0
TEMPLATE_NAME = "main.html"
