"""
go-cloud command-line interface.

Commands:
- serve: run the HTTP service
- probe: GET a probe endpoint of a running instance
"""
