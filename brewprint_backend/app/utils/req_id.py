# brewprint_backend/app/utils/req_id.py
from __future__ import annotations
import time, uuid

def new_request_id(prefix: str = "req") -> str:
    return f"{prefix}-{int(time.time()*1000)}-{uuid.uuid4().hex[:8]}"
