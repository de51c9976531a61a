from collections import deque
from typing import Dict, Any
from bunny_maze.core.grid import Maze


class MazeAnalyzer:
    @staticmethod
    def shortest_path_length(maze: Maze) -> int:
        """
        Number of cells on a shortest start -> goal route (BFS over open cells).
        0 if the goal cannot be reached.
        """
        distances = MazeAnalyzer._distances(maze)
        if maze.goal not in distances:
            return 0
        return distances[maze.goal] + 1

    @staticmethod
    def _distances(maze: Maze) -> Dict[tuple, int]:
        start = maze.start
        if maze.is_obstacle(*start):
            return {}

        distances = {start: 0}
        queue = deque([start])
        while queue:
            cx, cy = queue.popleft()
            for nxt in maze.get_open_neighbors(cx, cy):
                if nxt not in distances:
                    distances[nxt] = distances[(cx, cy)] + 1
                    queue.append(nxt)
        return distances

    @staticmethod
    def calculate_stats(maze: Maze) -> Dict[str, Any]:
        obstacles = maze.obstacle_count()
        total = maze.size * maze.size
        distances = MazeAnalyzer._distances(maze)

        return {
            "size": maze.size,
            "obstacles": obstacles,
            "obstacle_percent": (obstacles / total) * 100 if total > 0 else 0,
            "reachable": len(distances),
            "shortest_path": distances[maze.goal] + 1 if maze.goal in distances else 0,
        }
