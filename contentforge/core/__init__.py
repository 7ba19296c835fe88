"""Schema decoding engine — decoder, type resolver, walker, auditor."""
