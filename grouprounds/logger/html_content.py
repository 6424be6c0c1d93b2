CSS_LOG = """
/* Base styles */
body {
    font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif;
    background: #1e1e1e;
    color: #e0e0e0;
    margin: 2em;
}

.section {
    margin: 1.5em 0;
    padding: 1em;
    background: #2d2d2d;
    border-radius: 4px;
}

.subsection h4 {
    color: #9ecbff;
    margin: 0.8em 0 0.4em 0;
}

.info {
    margin: 0.3em 0;
}

.error {
    color: #ff8080;
}

.debug {
    color: #999999;
    font-size: 0.9em;
}

.result {
    margin: 0.5em 0;
    padding: 0.5em;
    background: #233423;
    border-left: 3px solid #4caf50;
}

.error-container {
    margin: 1em 0;
    padding: 1em;
    background: #331f1f;
    border-radius: 4px;
}

.stack-trace {
    white-space: pre-wrap;
    font-size: 0.85em;
    color: #cccccc;
}

/* Conflict matrix view */
.matrix-container {
    margin: 1.5em 0;
    overflow-x: auto;
}

.conflict-matrix td, .conflict-matrix th {
    padding: 2px 6px;
    text-align: center;
    font-family: monospace;
}

.conflict-matrix td.on {
    background: #7a2e2e;
}

.table-container table {
    border-collapse: collapse;
}

.table-container td, .table-container th {
    border: 1px solid #555555;
    padding: 6px 12px;
}
"""
