"""jfield tools: path parsing, navigation, coercion, output and the per-command CLIs."""
