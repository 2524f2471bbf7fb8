# eventcal/settings.py - configuration values shared across modules
from dotenv import load_dotenv
import os
load_dotenv()

DB_CONFIG = {
    'user': os.getenv('POSTGRES_USER', 'calendar'),
    'password': os.getenv('POSTGRES_PASSWORD', 'calendar'),
    'database': os.getenv('POSTGRES_DB', 'calendar_app'),
    'host': os.getenv('POSTGRES_HOST', 'localhost'),
    'port': int(os.getenv('POSTGRES_PORT', 5432)),
}
DB_POOL_MIN = int(os.getenv('DB_POOL_MIN', 1))
DB_POOL_MAX = int(os.getenv('DB_POOL_MAX', 10))

BOT_TOKEN = os.getenv('BOT_TOKEN')
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
APP_HOST = os.getenv('APP_HOST', '127.0.0.1')
APP_PORT = int(os.getenv('APP_PORT', 8080))
