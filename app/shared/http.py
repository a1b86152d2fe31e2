from typing import Any

def ok(data: Any = None, **extra):
    return {"ok": True, "data": data, **extra}
