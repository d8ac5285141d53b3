# PromptGenie package
# Expands user intent + parameters into a system-prompt request
# and forwards it to a pluggable model client.
