import os
import dotenv

dotenv.load_dotenv()

TENANT_ID = os.getenv("AZ_TENANT_ID")
CLIENT_ID = os.getenv("AZ_CLIENT_ID")
CLIENT_SECRET = os.getenv("AZ_CLIENT_SECRET")

# Pre-acquired Graph token, skips msal entirely when set.
ACCESS_TOKEN = os.getenv("AZ_ACCESS_TOKEN")

GRAPH_BASE = os.getenv("GRAPH_BASE", "https://graph.microsoft.com/v1.0")
GRAPH_SCOPES = ["https://graph.microsoft.com/.default"]
REQUEST_TIMEOUT = 120

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
