import struct
import json
import zlib
import logging
from love_maze.core.maze import Maze

logger = logging.getLogger(__name__)

class MazeSerializer:
    MAGIC = b"LOVE"
    VERSION = 1

    # Flags
    FLAG_COMPRESSED = 1
    FLAG_SEED_ONLY = 2

    @staticmethod
    def save(maze: Maze, filepath: str, seed_only=False, compress=False):
        """
        Saves a finished maze to a binary file.
        Format:
        - MAGIC (4 bytes)
        - VERSION (1 byte)
        - FLAGS (1 byte)
        - COLS, ROWS, PADDING_CELLS (4 bytes each)
        - META_LEN (2 bytes)
        - META_JSON (META_LEN bytes): seed, canvas width/height
        - DATA_LEN (4 bytes, 0 if seed_only)
        - DATA (compressed or raw cell bytes)
        """
        if not maze.is_done():
            raise ValueError("Only finished mazes can be saved")

        flags = 0
        if compress:
            flags |= MazeSerializer.FLAG_COMPRESSED
        if seed_only:
            flags |= MazeSerializer.FLAG_SEED_ONLY

        meta = {"seed": maze.seed, "width": maze.width, "height": maze.height}
        meta_bytes = json.dumps(meta).encode('utf-8')

        with open(filepath, "wb") as f:
            f.write(MazeSerializer.MAGIC)
            f.write(struct.pack("<BB", MazeSerializer.VERSION, flags))
            f.write(struct.pack("<III", maze.cols, maze.rows, maze.padding_cells))
            f.write(struct.pack("<H", len(meta_bytes)))
            f.write(meta_bytes)

            if seed_only:
                f.write(struct.pack("<I", 0))
            else:
                data = maze.grid.cells.tobytes()
                if compress:
                    data = zlib.compress(data)
                f.write(struct.pack("<I", len(data)))
                f.write(data)

        logger.debug(f"Saved {maze.cols}x{maze.rows} maze to {filepath} (flags={flags})")

    @staticmethod
    def load(filepath: str) -> Maze:
        """
        Rebuilds the maze by replaying its seed. Stored cells, when present,
        must match the replay exactly.
        """
        with open(filepath, "rb") as f:
            magic = f.read(4)
            if magic != MazeSerializer.MAGIC:
                raise ValueError("Invalid file format")

            try:
                version, flags = struct.unpack("<BB", f.read(2))
                cols, rows, padding = struct.unpack("<III", f.read(12))
                meta_len = struct.unpack("<H", f.read(2))[0]
                meta = json.loads(f.read(meta_len).decode('utf-8'))
                data_len = struct.unpack("<I", f.read(4))[0]
            except (struct.error, UnicodeError, ValueError) as e:
                raise ValueError(f"Corrupt maze file: {e}") from e

            if version != MazeSerializer.VERSION:
                raise ValueError(f"Unsupported maze file version {version}")

            data = f.read(data_len) if data_len else b""
            if len(data) != data_len:
                raise ValueError("Corrupt maze file: truncated cell data")

        maze = Maze(cols, rows, padding, meta.get("seed", ""),
                    meta.get("width", Maze.DEFAULT_CANVAS), meta.get("height", Maze.DEFAULT_CANVAS))
        maze.run_all()

        if data and not flags & MazeSerializer.FLAG_SEED_ONLY:
            if flags & MazeSerializer.FLAG_COMPRESSED:
                try:
                    data = zlib.decompress(data)
                except zlib.error as e:
                    raise ValueError(f"Corrupt maze file: {e}") from e
            if data != maze.grid.cells.tobytes():
                raise ValueError("Stored cells do not match the maze regenerated from its seed")

        return maze
