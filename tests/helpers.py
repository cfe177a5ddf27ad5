from collections import deque

from mazegen.model.direction import Direction


def open_adjacency(maze):
    """Map (row, column) -> set of neighbor coords reachable through an absent wall."""
    adj = {}
    for row in maze.cells():
        for cell in row:
            links = set()
            for d in cell.openings():
                links.add((cell.row + d.row_offset, cell.column + d.column_offset))
            adj[cell.coords] = links
    return adj


def bfs_distances(adj, origin):
    dist = {origin: 0}
    q = deque([origin])
    while q:
        cur = q.popleft()
        for nxt in adj[cur]:
            if nxt not in dist:
                dist[nxt] = dist[cur] + 1
                q.append(nxt)
    return dist


def assert_perfect(maze):
    adj = open_adjacency(maze)
    cells = maze.width * maze.height

    # Every opening leads to a cell inside the grid
    for (r, c), links in adj.items():
        for nr, nc in links:
            assert 0 <= nr < maze.height and 0 <= nc < maze.width

    # Wall removal is symmetric
    for row in maze.cells():
        for cell in row:
            for d in Direction:
                nr, nc = cell.row + d.row_offset, cell.column + d.column_offset
                if 0 <= nr < maze.height and 0 <= nc < maze.width:
                    other = maze.cell(nr, nc)
                    assert cell.has_wall(d) == other.has_wall(d.opposite())

    edges = sum(len(links) for links in adj.values()) // 2
    assert edges == cells - 1
    assert maze.edge_count() == cells - 1
    assert len(bfs_distances(adj, (0, 0))) == cells
