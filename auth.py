# auth.py
"""
Bearer token dependency shared by the routers.

Tokens are issued by the account service; this module only verifies them.
"""
from fastapi import HTTPException, Request
from jose import JWTError, jwt

import config


def verify_token(request: Request) -> dict:
     auth = request.headers.get("Authorization")
     if not auth or not auth.startswith("Bearer "):
          raise HTTPException(status_code=401, detail="Missing token")
     token = auth.split(" ", 1)[1]
     if not config.JWT_SECRET:
          raise HTTPException(status_code=500, detail="JWT_SECRET is not configured")
     try:
          payload = jwt.decode(token, config.JWT_SECRET, algorithms=[config.JWT_ALGORITHM])
          return payload
     except JWTError:
          raise HTTPException(status_code=403, detail="Invalid token")
