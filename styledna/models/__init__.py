"""Data models: path commands, style summaries, rules, compliance results and API schemas."""
