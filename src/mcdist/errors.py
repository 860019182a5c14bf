# src/mcdist/errors.py


class InvalidArgument(ValueError):
    """
    Argument invalid dat estimatorului (n ne-pozitiv sau ne-întreg, metodă
    necunoscută, workers/chunk_size <= 0 etc.).
    Moștenește ValueError, deci codul care prinde ValueError îl prinde și pe acesta.
    """
