def values(obj: object) -> list:
    return [v for k, v in obj.__dict__.items() if "__" not in k]
