from separation.separation_tester import split_by_line


def commit(graph, order, coords, line, solution):
    """
    Adopts `line` into the solution and disconnects every pair it
    separates. This is the only place connections are removed.

    Returns the number of directed connections removed (at least 2 when
    called after a positive has_live_crossing).
    """
    line.commit()
    solution.add(line)

    before = graph.remaining_total()
    left, right = split_by_line(order, coords, line)
    for i in left:
        for j in right:
            graph.disconnect(int(i), int(j))

    return before - graph.remaining_total()
