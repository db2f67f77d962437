"""Container entrypoint — reads PORT and starts uvicorn."""
import os

import uvicorn

port = int(os.environ.get("PORT", 8000))
print(f"Starting polyblog on port {port}", flush=True)

uvicorn.run(
    "polyblog.web.app:create_app",
    host="0.0.0.0",
    port=port,
    factory=True,
    log_level="info",
)
