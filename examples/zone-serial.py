import logging

from sna import DeltaOutOfRangeError, SerialNumber32


def main():
    logging.basicConfig(level=logging.DEBUG)
    log = logging.getLogger("zone-serial")

    primary = SerialNumber32(4294967290)
    secondary = SerialNumber32(4294967290)
    for _ in range(10):
        primary += 1
    log.info("primary serial is now %s", primary)

    if primary > secondary:
        log.info("secondary (%s) is behind; zone transfer needed", secondary)
    try:
        primary.checked_add(2**31)
    except DeltaOutOfRangeError as e:
        log.info("refused: %s", e)


if __name__ == "__main__":
    main()
