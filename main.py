# main.py

# Load .env before the application reads its settings
from dotenv import load_dotenv
load_dotenv(override=True)

from winestock import create_app

# Uvicorn looks this up with factory=True
app = create_app
