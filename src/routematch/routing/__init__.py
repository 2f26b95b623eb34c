"""Routing — base URL + path pattern matching and an ordered route table.

``match_route`` is the pure matcher; ``Router`` runs it over registered
routes, one candidate at a time.
"""
