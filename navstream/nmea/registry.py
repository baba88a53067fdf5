"""Sentence registry: one live record per sentence type.

The registry receives the token sequence of each decode cycle and runs every
sentence decoder against it. Each decoder works on a copy of its record and
the copy replaces the live record only when the decoder finished without a
``FormatError``. A malformed number therefore costs only the sentence type it
appeared in; the other types still take their fresh values, and the failed
type keeps its last successfully decoded values.

Callers only ever receive deep copies of the records, so nothing outside the
registry can mutate its state.
"""

import copy
from collections.abc import Callable, Iterable
from typing import Any

from navstream.nmea.fields import (
    DEFAULT_TALKER_IDS,
    SENTENCE_START,
    FormatError,
    headers_for,
)
from navstream.nmea.gga import decode_gga
from navstream.nmea.gsa import decode_gsa
from navstream.nmea.gsv import decode_gsv
from navstream.nmea.rmc import decode_rmc
from navstream.nmea.types import (
    DecodeResult,
    DecodeStatus,
    GGAData,
    GSAData,
    GSVData,
    RMCData,
    SentenceRecord,
    SentenceType,
    VTGData,
)
from navstream.nmea.vtg import decode_vtg

__all__ = ["SentenceRegistry"]

Decoder = Callable[[list[str], Any, frozenset[str]], bool]

_DECODERS: dict[SentenceType, Decoder] = {
    SentenceType.RMC: decode_rmc,
    SentenceType.GGA: decode_gga,
    SentenceType.GSA: decode_gsa,
    SentenceType.GSV: decode_gsv,
    SentenceType.VTG: decode_vtg,
}

_RECORD_FACTORIES: dict[SentenceType, Callable[[], SentenceRecord]] = {
    SentenceType.RMC: RMCData,
    SentenceType.GGA: GGAData,
    SentenceType.GSA: GSAData,
    SentenceType.GSV: GSVData,
    SentenceType.VTG: VTGData,
}


class SentenceRegistry:
    """Owns the current record of every supported sentence type.

    Args:
        talker_ids: Talker prefixes whose sentences are decoded
            (default: ``("GP",)``, so "$GPRMC" but not "$GNRMC").
            Sentences from other talkers still appear in
            ``discovered_headers``.

    Example:
        >>> registry = SentenceRegistry()
        >>> registry.decode_cycle(tokens).ok
        True
        >>> registry.rmc.status
        'A'
    """

    def __init__(self, talker_ids: Iterable[str] = DEFAULT_TALKER_IDS) -> None:
        self._talker_ids = tuple(talker_ids)
        self._headers = {
            sentence_type: headers_for(sentence_type.value, self._talker_ids)
            for sentence_type in SentenceType
        }
        self._records: dict[SentenceType, SentenceRecord] = {}
        self._discovered: dict[str, None] = {}
        self._updated: tuple[SentenceType, ...] = ()
        self.reset()

    @property
    def talker_ids(self) -> tuple[str, ...]:
        return self._talker_ids

    @property
    def updated_types(self) -> tuple[SentenceType, ...]:
        """Sentence types committed by the most recent decode cycle."""
        return self._updated

    def reset(self) -> None:
        """Restore every record to its defaults and forget seen headers."""
        self._records = {
            sentence_type: factory()
            for sentence_type, factory in _RECORD_FACTORIES.items()
        }
        self._discovered.clear()
        self._updated = ()

    def _discover_headers(self, tokens: list[str]) -> None:
        for token in tokens:
            if token.startswith(SENTENCE_START):
                self._discovered.setdefault(token, None)

    def _run_decoder(self, sentence_type: SentenceType, tokens: list[str]) -> bool:
        """Decode into a working copy and commit it if anything was found.

        Raises:
            FormatError: Propagated from the decoder; the live record is
                left untouched.
        """
        working = copy.deepcopy(self._records[sentence_type])
        decoder = _DECODERS[sentence_type]
        found = decoder(tokens, working, self._headers[sentence_type])
        if found:
            self._records[sentence_type] = working
        return found

    def decode_cycle(self, tokens: list[str]) -> DecodeResult:
        """Run every sentence decoder against one cycle's token sequence.

        Headers of unsupported sentence types are recorded but not decoded.
        Decoders whose headers do not occur in ``tokens`` are not run, and
        a type without a match is not a failure.

        Args:
            tokens: Ordered tokens of the decodable buffer prefix

        Returns:
            ``DecodeResult`` with status OK, or DECODE_ERROR naming every
            sentence type whose fields could not be converted
        """
        self._discover_headers(tokens)
        present = set(tokens)

        updated: list[SentenceType] = []
        failures: list[str] = []
        for sentence_type in SentenceType:
            if self._headers[sentence_type].isdisjoint(present):
                continue
            try:
                if self._run_decoder(sentence_type, tokens):
                    updated.append(sentence_type)
            except FormatError as e:
                failures.append(f"{sentence_type.value}: {e}")
        self._updated = tuple(updated)

        if failures:
            return DecodeResult(DecodeStatus.DECODE_ERROR, "; ".join(failures))
        return DecodeResult(DecodeStatus.OK)

    def current_record(self, sentence_type: SentenceType) -> SentenceRecord:
        """Return a copy of the current record of ``sentence_type``."""
        return copy.deepcopy(self._records[sentence_type])

    def discovered_headers(self) -> list[str]:
        """Return every distinct sentence header seen, in first-seen order."""
        return list(self._discovered)

    @property
    def rmc(self) -> RMCData:
        return self.current_record(SentenceType.RMC)  # type: ignore[return-value]

    @property
    def gga(self) -> GGAData:
        return self.current_record(SentenceType.GGA)  # type: ignore[return-value]

    @property
    def gsa(self) -> GSAData:
        return self.current_record(SentenceType.GSA)  # type: ignore[return-value]

    @property
    def gsv(self) -> GSVData:
        return self.current_record(SentenceType.GSV)  # type: ignore[return-value]

    @property
    def vtg(self) -> VTGData:
        return self.current_record(SentenceType.VTG)  # type: ignore[return-value]
