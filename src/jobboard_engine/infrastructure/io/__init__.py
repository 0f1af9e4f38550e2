"""IO adapters: filesystem, HTTP and payload validation."""
