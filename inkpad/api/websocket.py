"""WebSocket handler for real-time signing"""

import logging
from fastapi import WebSocket, WebSocketDisconnect
from typing import Dict

from inkpad.core.canvas import RasterSurface
from inkpad.core.options import SignaturePadOptions
from inkpad.core.signature_pad import OriginOffset, SignaturePad
from inkpad.utils.helpers import numpy_to_base64_png
from inkpad.config import config

logger = logging.getLogger(__name__)


class PadSession:
    """
    WebSocket session for signing

    각 클라이언트 연결마다 하나의 pad와 surface를 소유
    """

    def __init__(self, websocket: WebSocket, session_id: str):
        """
        Initialize signing session

        Args:
            websocket: WebSocket connection
            session_id: Unique session identifier
        """
        logger.info(f"[Session {session_id}] Creating surface {config.RENDER_WIDTH}x{config.RENDER_HEIGHT}")
        self.ws = websocket
        self.session_id = session_id

        self.surface = RasterSurface(width=config.RENDER_WIDTH, height=config.RENDER_HEIGHT)
        self.origin = OriginOffset()
        self.pad = SignaturePad(
            self.surface,
            options=SignaturePadOptions.from_config(config),
            coordinate_transform=self.origin,
        )

    async def handle_message(self, data: dict):
        """
        Handle incoming WebSocket message

        Args:
            data: JSON message from client
        """
        msg_type = None
        try:
            msg_type = data.get('type')

            if msg_type == 'stroke_start':
                await self._handle_stroke_start(data)
            elif msg_type == 'stroke_update':
                await self._handle_stroke_update(data)
            elif msg_type == 'stroke_end':
                await self._handle_stroke_end(data)
            elif msg_type == 'clear':
                await self._handle_clear()
            elif msg_type == 'load_data':
                await self._handle_load_data(data)
            elif msg_type == 'get_data':
                await self._handle_get_data()
            elif msg_type == 'set_origin':
                await self._handle_set_origin(data)
            elif msg_type == 'request_render':
                await self.send_render()
            else:
                logger.warning(f"[Session {self.session_id}] Unknown message type: {msg_type}")
                await self.send_error(f"Unknown message type: {msg_type}")

        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"[Session {self.session_id}] Bad '{msg_type}' message: {e}")
            await self.send_error(f"Invalid '{msg_type}' message: {e}")
        except Exception as e:
            logger.exception(f"[Session {self.session_id}] Error handling '{msg_type}' message")
            await self.send_error(f"Error handling message: {e}")

    async def _handle_stroke_start(self, data: dict):
        """Handle stroke start"""
        x, y = float(data['x']), float(data['y'])
        logger.debug(f"[Session {self.session_id}] Stroke start at ({x:.1f}, {y:.1f})")

        self.pad.stroke_begin(x, y, data.get('time'), event=data)
        await self.send_render()

    async def _handle_stroke_update(self, data: dict):
        """Handle stroke update (pointer move while drawing)"""
        segment = self.pad.stroke_update(float(data['x']), float(data['y']), data.get('time'))

        # Nothing new to show until a segment is emitted
        if segment is not None:
            await self.send_render()

    async def _handle_stroke_end(self, data: dict):
        """Handle stroke end"""
        self.pad.stroke_end(event=data)

        await self.send_render()
        await self.send_stats()

    async def _handle_clear(self):
        """Clear the pad"""
        self.pad.clear()

        await self.send_render()
        await self.send_message({'type': 'cleared'})

    async def _handle_load_data(self, data: dict):
        """Replace the drawing with persisted point groups"""
        point_groups = data['point_groups']
        self.pad.from_data(point_groups, include_last_point=data.get('include_last_point', True))
        logger.info(f"[Session {self.session_id}] Loaded {len(point_groups)} point groups")

        await self.send_render()
        await self.send_stats()

    async def _handle_get_data(self):
        """Send the point groups drawn so far"""
        await self.send_message({
            'type': 'data',
            'point_groups': self.pad.to_data(),
            'is_empty': self.pad.is_empty()
        })

    async def _handle_set_origin(self, data: dict):
        """Update the client's surface origin offset"""
        self.origin.left = float(data.get('left', 0.0))
        self.origin.top = float(data.get('top', 0.0))
        await self.send_message({
            'type': 'origin_updated',
            'left': self.origin.left,
            'top': self.origin.top
        })

    async def send_render(self):
        """Encode the surface and send it to client"""
        await self.send_message({
            'type': 'render_update',
            'image': numpy_to_base64_png(self.surface.to_uint8()),
            'width': self.surface.width,
            'height': self.surface.height
        })

    async def send_stats(self):
        """Send drawing statistics to client"""
        await self.send_message({
            'type': 'stats',
            'num_groups': len(self.pad.drawing),
            'num_points': self.pad.drawing.point_count(),
            'num_segments': self.pad.segment_count,
            'is_empty': self.pad.is_empty()
        })

    async def send_message(self, data: dict):
        """Send JSON message to client"""
        await self.ws.send_json(data)

    async def send_error(self, error_msg: str):
        """Send error message to client"""
        await self.send_message({
            'type': 'error',
            'message': error_msg
        })


class ConnectionManager:
    """
    Manage WebSocket connections

    여러 클라이언트 연결 관리
    """

    def __init__(self):
        self.active_sessions: Dict[str, PadSession] = {}

    async def connect(self, websocket: WebSocket, session_id: str) -> PadSession:
        """
        Accept new WebSocket connection

        Args:
            websocket: WebSocket connection
            session_id: Unique session ID

        Returns:
            PadSession instance
        """
        await websocket.accept()

        session = PadSession(websocket, session_id)
        self.active_sessions[session_id] = session

        logger.info(f"[ConnectionManager] Session {session_id} connected. Total sessions: {len(self.active_sessions)}")

        return session

    def disconnect(self, session_id: str):
        """
        Remove session

        Args:
            session_id: Session ID to remove
        """
        if session_id in self.active_sessions:
            del self.active_sessions[session_id]
            logger.info(f"[ConnectionManager] Session {session_id} disconnected. Total sessions: {len(self.active_sessions)}")

    async def handle_session(self, session: PadSession):
        """
        Handle WebSocket session

        Args:
            session: PadSession instance
        """
        try:
            while True:
                data = await session.ws.receive_json()
                await session.handle_message(data)

        except WebSocketDisconnect:
            self.disconnect(session.session_id)
        except Exception:
            logger.exception(f"[ConnectionManager] Session {session.session_id} failed")
            self.disconnect(session.session_id)
            raise


# Global connection manager
manager = ConnectionManager()
