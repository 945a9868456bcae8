# itinerary_planner/config.py
import os

from dotenv import load_dotenv

load_dotenv()

# Places lookup credentials; without a Google key the planner uses placeholders only
GOOGLE_PLACES_API_KEY = os.getenv("GOOGLE_PLACES_API_KEY", "")
ORS_API_KEY = os.getenv("ORS_API_KEY", "")

GEOCODE_TIMEOUT = float(os.getenv("GEOCODE_TIMEOUT", "3"))
PLACES_TIMEOUT = float(os.getenv("PLACES_TIMEOUT", "6"))
SEARCH_RADIUS_METERS = int(os.getenv("SEARCH_RADIUS_METERS", "5000"))
MIN_PLACE_RATING = float(os.getenv("MIN_PLACE_RATING", "3.5"))

CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "₹")
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

HOST = os.getenv("HOST", "localhost")
PORT = int(os.getenv("PORT", "8081"))
