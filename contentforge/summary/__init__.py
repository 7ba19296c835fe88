"""Schema summary — read-only statistics and console rendering.

Modules
-------
projection
    ``SchemaSummary`` computes headline counts and a type breakdown from
    the content type list.
renderer
    ``SummaryRenderer`` turns summaries and completeness audits into Rich
    panels for the terminal.
"""
