"""Payment method assignment for order batches."""
