"""ODF tab stop writer."""

import logging

from ....styles.tab import Tab
from ....utils.enums import TabLeader, TabType
from ...base_writer import XMLStyleWriter

logger = logging.getLogger(__name__)

TAB_TYPES = {
    TabType.LEFT: "left",
    TabType.RIGHT: "right",
    TabType.CENTER: "center",
    TabType.DECIMAL: "char",
}

LEADERS = {
    TabLeader.DOT: ("dotted", "."),
    TabLeader.HYPHEN: ("dash", "-"),
    TabLeader.UNDERSCORE: ("solid", "_"),
    TabLeader.HEAVY: ("solid", "_"),
    TabLeader.MIDDLE_DOT: ("dotted", "·"),
}


class TabStyleWriter(XMLStyleWriter):
    """Writes one ``style:tab-stop`` element."""

    style_class = Tab

    def _write(self):
        tab = self.style
        tab_type = TAB_TYPES.get(tab.type)
        if tab_type is None:
            logger.debug(f"Tab type {tab.type.value!r} has no ODF equivalent, skipping")
            return

        xml_writer = self.xml_writer
        xml_writer.start_element("style:tab-stop")
        xml_writer.write_attribute("style:position", self.units.to_inch_string(tab.position))
        xml_writer.write_attribute("style:type", tab_type)
        if tab.type is TabType.DECIMAL:
            xml_writer.write_attribute("style:char", ".")
        leader = LEADERS.get(tab.leader)
        if leader is not None:
            xml_writer.write_attribute("style:leader-style", leader[0])
            xml_writer.write_attribute("style:leader-text", leader[1])
        xml_writer.end_element()
