# src/mongo_client.py
import logging
import os
from typing import Dict, Optional
from urllib.parse import quote_plus

from dotenv import load_dotenv
from pymongo import MongoClient
from pymongo.database import Database
import certifi

logger = logging.getLogger(__name__)

load_dotenv()

# Fixed cluster target; each piece can be overridden from the environment / .env
DEFAULT_USER = "fullstackopen"
DEFAULT_HOST = "cluster0.1w99zcl.mongodb.net"
DEFAULT_DBNAME = "noteApp"
DEFAULT_OPTIONS = "retryWrites=true&w=majority"


def load_settings() -> Dict[str, str]:
    """Resolve user/host/dbname/options. The password never comes from here."""
    return {
        "user": os.getenv("MONGODB_USER", DEFAULT_USER),
        "host": os.getenv("MONGODB_HOST", DEFAULT_HOST),
        "dbname": os.getenv("MONGODB_DBNAME", DEFAULT_DBNAME),
        "options": os.getenv("MONGODB_OPTIONS", DEFAULT_OPTIONS),
    }


def build_uri(password: str, settings: Optional[Dict[str, str]] = None) -> str:
    s = settings or load_settings()
    uri = f"mongodb+srv://{quote_plus(s['user'])}:{quote_plus(password)}@{s['host']}/{s['dbname']}"
    if s.get("options"):
        uri += f"?{s['options']}"
    return uri


def redact(uri: str) -> str:
    """Hide the password part of a connection string for logging."""
    scheme, sep, rest = uri.partition("://")
    creds, at, tail = rest.partition("@")
    if not at or ":" not in creds:
        return uri
    user = creds.split(":", 1)[0]
    return f"{scheme}{sep}{user}:****@{tail}"


def connect(password: str, settings: Optional[Dict[str, str]] = None) -> MongoClient:
    """
    Open a client and wait for the server handshake.
    Any failure (DNS, auth, unreachable host) is raised as-is from pymongo.
    """
    uri = build_uri(password, settings)
    logger.info("Connecting to %s", redact(uri))

    # certifi's CA bundle keeps TLS trust consistent across platforms
    client = MongoClient(
        uri,
        tlsCAFile=certifi.where(),
        serverSelectionTimeoutMS=30000,
    )
    client.admin.command("ping")
    logger.debug("Ping ok")
    return client


def get_db(client: MongoClient, settings: Optional[Dict[str, str]] = None) -> Database:
    s = settings or load_settings()
    return client[s["dbname"]]
