import os

SECRET_KEY = os.getenv("SECRET_KEY")

# Calculator state is kept in the signed session cookie
SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "calculator_session")
SESSION_COOKIE_SAMESITE = "Lax"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Jinja2 whitespace control - prevents unwanted line breaks in rendered HTML
JINJA2_TRIM_BLOCKS = True
JINJA2_LSTRIP_BLOCKS = True
