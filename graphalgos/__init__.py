"""Shortest paths, spanning trees, strongly connected components and PageRank."""

__version__ = "0.1.0"
__all__ = ["dijkstra", "prim", "kruskal", "kosaraju", "pagerank"]