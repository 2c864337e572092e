"""
qc CLI - run properties from the command line

Commands:
- qc run MODULE:FUNCTION - Run a property (or an existence search)
- qc types - List annotations with a registered domain
- qc version - Show version information
"""
