class OptionException(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message

class OptionSpecException(OptionException):
    pass

class OptionExistsError(OptionSpecException):
    def __init__(self, option: str):
        super().__init__(f"Option ‘{option}’ already exists")
        self.option = option

class InvalidOptionFormatError(OptionSpecException):
    def __init__(self, format: str):
        super().__init__(f"Invalid option format ‘{format}’")
        self.format = format
