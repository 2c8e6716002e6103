"""Services Layer — the ModelDispatch facade over the model endpoint."""
