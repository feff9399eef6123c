# Contains input parsing and validation
import json

from ..errors import MalformedInputError


class JsonNormalizer:
    """
    Turns the caller's input into the JSON object the generators work on.
    """

    @staticmethod
    def load(json_data):
        """
        Parse JSON text if needed and make sure the root is an object.

        Args:
            json_data: JSON text (str or bytes) or an already parsed dict

        Returns:
            dict: The root JSON object

        Raises:
            MalformedInputError: If the text is not valid JSON or the root is not an object
        """
        # Parse JSON if it's a string
        if isinstance(json_data, (str, bytes, bytearray)):
            try:
                json_data = json.loads(json_data)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise MalformedInputError(f"The JSON could not be parsed: {e}") from e

        if not isinstance(json_data, dict):
            raise MalformedInputError(
                f"The input JSON must be an object type, got {type(json_data).__name__}")

        return json_data

    @staticmethod
    def load_file(path, encoding="utf-8"):
        """Read and validate a JSON document from a file path."""
        with open(path, "r", encoding=encoding) as f:
            return JsonNormalizer.load(f.read())
