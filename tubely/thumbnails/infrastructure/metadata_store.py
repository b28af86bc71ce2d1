"""
Video Metadata Store Implementations.

SQLite-backed implementation of the video metadata store interface.
"""

import asyncio
import logging
import sqlite3
from typing import Optional
from pathlib import Path

from ..domain.errors import MetadataStoreError
from ..domain.interfaces import VideoMetadataStore
from ..domain.models import VideoRecord
from ...core.timezone_utils import parse_timestamp


SCHEMA = """
CREATE TABLE IF NOT EXISTS videos (
    id TEXT PRIMARY KEY,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL,
    title TEXT NOT NULL,
    description TEXT,
    thumbnail_url TEXT,
    video_url TEXT,
    user_id TEXT NOT NULL
)
"""


class SQLiteVideoMetadataStore(VideoMetadataStore):
    """SQLite implementation of the video metadata store"""

    def __init__(self, db_path: str):
        self.db_path = db_path
        self.logger = logging.getLogger(__name__)

    def initialize(self) -> None:
        """Create the videos table if it doesn't exist"""
        db_dir = Path(self.db_path).parent
        db_dir.mkdir(parents=True, exist_ok=True)

        conn = self._connect()
        try:
            with conn:
                conn.execute(SCHEMA)
        finally:
            conn.close()
        self.logger.info(f"Video metadata database ready at {self.db_path}")

    async def get_by_id(self, video_id: str) -> Optional[VideoRecord]:
        """Get video record by ID"""
        try:
            row = await asyncio.to_thread(self._fetch_one, video_id)
        except sqlite3.Error as e:
            self.logger.error(f"Error getting video {video_id}: {e}")
            raise MetadataStoreError(f"Could not read video {video_id}") from e

        if row is None:
            return None
        return self._convert_to_record(row)

    async def update(self, record: VideoRecord) -> None:
        """Persist a record by its ID"""
        try:
            updated = await asyncio.to_thread(self._update_row, record)
        except sqlite3.Error as e:
            self.logger.error(f"Error updating video {record.id}: {e}")
            raise MetadataStoreError(f"Could not update video {record.id}") from e

        if not updated:
            raise MetadataStoreError(f"Video {record.id} no longer exists")

    async def create(self, record: VideoRecord) -> VideoRecord:
        """Insert a new video record"""
        try:
            await asyncio.to_thread(self._insert_row, record)
        except sqlite3.Error as e:
            self.logger.error(f"Error creating video {record.id}: {e}")
            raise MetadataStoreError(f"Could not create video {record.id}") from e

        self.logger.info(f"Created video {record.id} for user {record.user_id}")
        return record

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _fetch_one(self, video_id: str) -> Optional[sqlite3.Row]:
        conn = self._connect()
        try:
            return conn.execute("SELECT * FROM videos WHERE id = ?", (video_id,)).fetchone()
        finally:
            conn.close()

    def _update_row(self, record: VideoRecord) -> bool:
        conn = self._connect()
        try:
            with conn:
                cursor = conn.execute(
                    """
                    UPDATE videos
                    SET title = ?, description = ?, created_at = ?, updated_at = ?,
                        thumbnail_url = ?, video_url = ?, user_id = ?
                    WHERE id = ?
                    """,
                    (
                        record.title,
                        record.description,
                        record.created_at.isoformat(),
                        record.updated_at.isoformat(),
                        record.thumbnail_url,
                        record.video_url,
                        record.user_id,
                        record.id,
                    ),
                )
            return cursor.rowcount > 0
        finally:
            conn.close()

    def _insert_row(self, record: VideoRecord) -> None:
        conn = self._connect()
        try:
            with conn:
                conn.execute(
                    """
                    INSERT INTO videos (id, created_at, updated_at, title, description, thumbnail_url, video_url, user_id)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        record.id,
                        record.created_at.isoformat(),
                        record.updated_at.isoformat(),
                        record.title,
                        record.description,
                        record.thumbnail_url,
                        record.video_url,
                        record.user_id,
                    ),
                )
        finally:
            conn.close()

    def _convert_to_record(self, row: sqlite3.Row) -> VideoRecord:
        """Convert a database row to a VideoRecord"""
        return VideoRecord(
            id=row["id"],
            title=row["title"],
            description=row["description"] or "",
            created_at=parse_timestamp(row["created_at"]),
            updated_at=parse_timestamp(row["updated_at"]),
            user_id=row["user_id"],
            thumbnail_url=row["thumbnail_url"],
            video_url=row["video_url"],
        )
