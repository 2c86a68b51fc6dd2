"""Run the web app: python -m vibeset"""

import os

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "vibeset.api.fastapi_app:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
    )
