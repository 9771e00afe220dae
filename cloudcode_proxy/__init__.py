"""Cloud Code Proxy

Translates Claude Messages API requests into Cloud Code (v1internal) envelopes.
"""

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("cloudcode-proxy")
except PackageNotFoundError:
    # Fallback for source checkouts that were never installed
    __version__ = "1.0.0"
__author__ = "Cloud Code Proxy"
