"""
netdiag command line interface.
"""
