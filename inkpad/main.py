"""
FastAPI main application

Signature ink server
"""

from fastapi import FastAPI, WebSocket
from fastapi.staticfiles import StaticFiles
from fastapi.responses import HTMLResponse
from fastapi.middleware.cors import CORSMiddleware
import logging
import uvicorn
import uuid
import os

from inkpad.api.websocket import manager
from inkpad.api.render import router as render_router
from inkpad.config import config

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="inkpad",
    description="Variable-width signature ink server",
    version="0.1.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(render_router)

# Mount static files (frontend)
frontend_dir = os.path.join(os.path.dirname(__file__), "..", "frontend")
if os.path.exists(frontend_dir):
    app.mount("/static", StaticFiles(directory=frontend_dir), name="static")


@app.get("/", response_class=HTMLResponse)
async def root():
    """Serve main page"""
    index_path = os.path.join(frontend_dir, "index.html")

    if os.path.exists(index_path):
        with open(index_path, 'r', encoding='utf-8') as f:
            return f.read()
    else:
        return """
        <html>
            <head><title>inkpad</title></head>
            <body>
                <h1>inkpad server</h1>
                <p>Frontend not found. Please check frontend directory.</p>
                <p>WebSocket endpoint: ws://localhost:8000/ws</p>
            </body>
        </html>
        """


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "ok",
        "service": "inkpad",
        "version": "0.1.0",
        "active_sessions": len(manager.active_sessions)
    }


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket):
    """
    WebSocket endpoint for signing

    클라이언트는 이 엔드포인트로 연결하여 실시간으로 서명을 그린다
    """
    session_id = str(uuid.uuid4())

    session = await manager.connect(websocket, session_id)

    await session.send_message({
        'type': 'connected',
        'session_id': session_id,
        'config': {
            'width': session.surface.width,
            'height': session.surface.height,
            'options': session.pad.options.to_dict()
        }
    })

    # Initial render (background only)
    await session.send_render()

    await manager.handle_session(session)


def main():
    """Run the server"""
    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    logger.info(f"[Server] http://{config.HOST}:{config.PORT}  ws://{config.HOST}:{config.PORT}/ws")

    uvicorn.run(
        "inkpad.main:app",
        host=config.HOST,
        port=config.PORT,
        reload=config.DEBUG,
        log_level=config.LOG_LEVEL
    )


if __name__ == "__main__":
    main()
