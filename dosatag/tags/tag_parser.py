import logging

from dosatag.exceptions import DosaTagError, ErrKind
from dosatag.keys.parser import default_parser
from dosatag.util.identifier import is_valid_key_token
from dosatag.util.segment_splitter import Segment, split_segments, \
                                          split_key_value, is_closed_group


logger = logging.getLogger(__name__)


class TagParser(object):
    """ TagParser class

    Base class of entity, index and field tag parsers. Subclasses fill
    in the processors dictionary: tag key -> processor method. Each
    processor receives the value and the segment it came from and
    returns the parsed value.
    """

    # Used in 'invalid <tag_kind>: <segment>' messages
    tag_kind = "dosa tag"

    # Keys whose value is a key expression; a following bare key token
    # belongs to that expression, e.g. 'primaryKey=a,b'
    key_expression_keys = ()

    def __init__(self, key_parser=None):
        self.key_parser = key_parser or default_parser()
        self.processors = {}



    def malformed(self, text):
        message = "invalid {0}: {1}".format(self.tag_kind, text)
        return DosaTagError(message, ErrKind.MALFORMED_SEGMENT, fragment=text)



    def scalar(self, value, segment):
        """ Rejects values made of more than one token, e.g. 'jj sddf' """

        if len(value.split()) > 1:
            raise self.malformed(segment.text)
        return value



    def continues_key_expression(self, previous, segment):
        """ Checks if segment is the remainder of a key expression

        A bare key token such as 'adsf' in 'primaryKey=ok,adsf' belongs
        to the key expression before it. Keys of this tag, e.g. 'ttl',
        and anything following a closed group, e.g. '(ok), nxxx', do not.
        """

        pair = split_key_value(previous)
        if pair is None or pair[0] not in self.key_expression_keys:
            return False
        if "=" in segment.text or segment.text in self.processors:
            return False
        if not is_valid_key_token(segment.text):
            return False
        return not is_closed_group(pair[1])



    def merged_segments(self, tag):
        """ Splits tag into segments, gluing key expression remainders

        Details
        -------
        1. We split the tag into segments.
        2. A segment that continues the key expression before it is
           merged into it, so the key expression parser reports the
           whole expression, e.g. 'ok,adsf'.
        """

        merged = []
        for segment in split_segments(tag):
            if merged and self.continues_key_expression(merged[-1], segment):
                previous = merged[-1]
                merged[-1] = Segment(tag[previous.start:segment.end],
                                     previous.start,
                                     segment.end)
                continue
            merged.append(segment)
        return merged



    def process(self, tag):
        """ Runs processors over all segments of the tag

        Parameters
        ----------
        tag : str
            Raw tag string

        Returns
        -------
        dict
            Tag key -> processed value, only for keys present in the tag

        Raises
        ------
        DosaTagError
            MALFORMED_SEGMENT for segments without '=', unknown or
            repeated keys; whatever the processors raise
        """

        results = {}
        for segment in self.merged_segments(tag):
            pair = split_key_value(segment)
            if pair is None:
                raise self.malformed(segment.text)

            key, value = pair
            processor = self.processors.get(key)
            if processor is None or key in results:
                raise self.malformed(segment.text)

            results[key] = processor(value, segment)
        return results



    def missing(self, key, tag, owner):
        message = "missing '{0}' in {1} '{2}' of {3}" \
                  .format(key, self.tag_kind, tag, owner)
        logger.debug(message)
        return DosaTagError(message, ErrKind.MISSING_REQUIRED_KEY, fragment=tag)
