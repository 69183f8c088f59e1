# server/storage.py

from fastapi import Depends
from config import Settings, get_settings
from core.hosts import HostStore


def get_store(settings: Settings = Depends(get_settings)) -> HostStore:
    return HostStore(settings.hosts_file)
