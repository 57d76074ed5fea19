from depinsight.deducers.pom_xml import PomXmlDeducer
from depinsight.domain.models import Position

POM = """<project>
  <modelVersion>4.0.0</modelVersion>
  <dependencies>
    <dependency>
      <groupId>org.apache.commons</groupId>
      <artifactId>commons-lang3</artifactId>
      <version>3.12.0</version>
    </dependency>
    <dependency>
      <groupId>com.google.code.gson</groupId>
      <artifactId>gson</artifactId>
      <version>2.8.8</version>
    </dependency>
  </dependencies>
</project>
"""


def test_finds_first_block():
    assert PomXmlDeducer().locate(POM, "org.apache.commons:commons-lang3") == Position(line=4, column=5)


def test_finds_second_block_not_first():
    assert PomXmlDeducer().locate(POM, "com.google.code.gson:gson") == Position(line=9, column=5)


def test_group_and_artifact_must_share_a_block():
    assert PomXmlDeducer().locate(POM, "org.apache.commons:gson") is None


def test_trailing_coordinates_are_ignored():
    # Maven reports may append type/version: group:artifact:jar:2.8.8
    assert PomXmlDeducer().locate(POM, "com.google.code.gson:gson:jar:2.8.8") == Position(line=9, column=5)


def test_reads_from_file(tmp_path):
    p = tmp_path / "pom.xml"
    p.write_text(POM)
    assert PomXmlDeducer().find_dependency_position(p, "com.google.code.gson:gson") == Position(line=9, column=5)


def test_returns_none_when_file_missing(tmp_path):
    assert PomXmlDeducer().find_dependency_position(tmp_path / "pom.xml", "a:b") is None
