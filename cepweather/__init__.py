"""CEP weather services: postal-code temperature lookup with distributed tracing."""
