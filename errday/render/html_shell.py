# errday/render/html_shell.py
from __future__ import annotations

HTML_SHELL = r"""<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width, initial-scale=1" />
<title>ERR DAY</title>
<style>
@@STYLE@@
</style>
</head>
<body>
@@MARKUP@@
<script id="errday-data" type="application/json">
@@DAY_DATA@@
</script>

<script>
@@SCRIPT@@
</script>
</body>
</html>
"""
