"""BZSt eVatR XML-RPC integration."""
