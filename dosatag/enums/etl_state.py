from enum import Enum


class ETLState(Enum):
    """ ETLState enum class

    Tells if records of an entity are exported to the ETL pipeline.
    """

    def __str__(self):
        return str(self.name)

    OFF = 0
    ON  = 1


    @classmethod
    def from_tag_value(cls, value):
        """ Resolves case-insensitive 'on' / 'off'

        Returns
        -------
        ETLState or None
            None if value is neither 'on' nor 'off'
        """

        lowered = value.lower()
        if lowered == "on":
            return cls.ON
        if lowered == "off":
            return cls.OFF
        return None
