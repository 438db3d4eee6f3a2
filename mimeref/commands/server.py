"""mimeref server — start the FastAPI lookup server with uvicorn."""
from __future__ import annotations

import sys


def cmd_server(args) -> None:
    try:
        import uvicorn
    except ImportError:
        print("mimeref: uvicorn not installed. Run: pip install mimeref[server]", file=sys.stderr)
        sys.exit(1)

    host_bind = getattr(args, "host", "127.0.0.1")
    port = getattr(args, "port", 8766)
    reload = getattr(args, "reload", False)

    print(f"Starting mimeref server on {host_bind}:{port}", flush=True)

    uvicorn.run(
        "server.main:app",
        host=host_bind,
        port=port,
        reload=reload,
    )
