# server/api/hosts.py

import logging
from pydantic import BaseModel
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.auth import get_current_user
from config import Settings, get_settings
from core.errors import ReloadError, StoreError, ValidationError
from core.hosts import HostStore
from core.reload import reload_dns
from core.validation import validate_hostname, validate_ip
from storage import get_store


# -------------------------------
# Router & Schemas
# -------------------------------

router = APIRouter()
logger = logging.getLogger(__name__)


class HostData(BaseModel):
    """
    Request schema for adding a host. Presence is checked by the endpoint
    so each missing field gets its own message.
    """
    host: str | None = None
    ip: str | None = None


class HostName(BaseModel):
    host: str | None = None


def failure(message: str, cause: Exception) -> JSONResponse:
    return JSONResponse(status_code=401, content={"message": message, "cause": str(cause)})


# -------------------------------
# Endpoints
# -------------------------------

@router.get("/ping")
def ping():
    return {"message": "Pong!"}


@router.get("/list")
def list_hosts(user: str = Depends(get_current_user), store: HostStore = Depends(get_store)):
    """
    Returns every host record in file order.
    """
    try:
        hosts = store.list_hosts()
    except StoreError as e:
        logger.exception("Listing hosts failed")
        return failure("Failed to list hosts", e)

    return {"success": True, "hosts": [record.to_dict() for record in hosts]}


@router.post("/add")
def add_host(
    data: HostData,
    user: str = Depends(get_current_user),
    store: HostStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """
    Appends a host record, then reloads the DNS service.
    A reload failure is reported after the record has already been written.
    """
    if not data.host:
        raise ValidationError("host object is missing")
    if not data.ip:
        raise ValidationError("ip object is missing")
    if not validate_ip(data.ip):
        raise ValidationError("Invalid ip address", ip=data.ip)
    if not validate_hostname(data.host):
        raise ValidationError("Invalid host", host=data.host)

    with store.lock:
        try:
            if store.host_exists(data.host):
                raise ValidationError("host already exists", host=data.host)
            store.append_host(data.ip, data.host)
        except StoreError as e:
            logger.exception("Adding host %s failed", data.host)
            return failure("Failed to add host", e)

    logger.info("%s added host %s -> %s", user, data.host, data.ip)

    try:
        reload_dns(settings.reload_command)
    except ReloadError as e:
        return failure("Host added, but failed to reload dns", e)

    return {"success": True, "message": "Host added", "host": data.host, "ip": data.ip}


@router.post("/del")
def delete_host(
    data: HostName,
    user: str = Depends(get_current_user),
    store: HostStore = Depends(get_store),
):
    """
    Removes every record for the host. The DNS service is not reloaded.
    """
    if not data.host:
        raise ValidationError("host object is missing")

    with store.lock:
        try:
            if not store.host_exists(data.host):
                raise ValidationError("host does not exist", host=data.host)
            store.delete_host(data.host)
        except StoreError as e:
            logger.exception("Removing host %s failed", data.host)
            return failure("Failed to remove host", e)

    logger.info("%s deleted host %s", user, data.host)
    return {"success": True, "message": "Deleted host", "host": data.host}
