"""View layer: risk flags, filters, sorting, labels and table rows."""
