"""Tests for reference and framework assembly groups."""

from frameworks import ANY_FRAMEWORK, UNSUPPORTED_FRAMEWORK, parse as parse_framework
from nuspec import NuspecReader

NS = "http://schemas.microsoft.com/packaging/2012/06/nuspec.xsd"


def make_reader(body: str) -> NuspecReader:
    """Helper to build a reader around a metadata body."""
    return NuspecReader.from_string(f"""<package xmlns="{NS}">
  <metadata>
    <id>Contoso.Widgets</id>
    <version>1.0.0</version>
    {body}
  </metadata>
</package>""")


class TestReferenceGroups:
    """Test reference group resolution."""

    def test_grouped_references(self):
        """Each group keeps its files in document order, duplicates included."""
        reader = make_reader("""
    <references>
      <group targetFramework="net45">
        <reference file="b.dll" />
        <reference file="a.dll" />
        <reference file="a.dll" />
      </group>
      <group>
        <reference file="c.dll" />
      </group>
    </references>""")

        groups = list(reader.get_reference_groups())

        assert groups[0].target_framework == parse_framework("net45")
        assert groups[0].items == ("b.dll", "a.dll", "a.dll")
        assert groups[1].target_framework == ANY_FRAMEWORK
        assert groups[1].items == ("c.dll",)

    def test_empty_group_is_kept(self):
        """An explicit group without references still appears."""
        reader = make_reader("""
    <references>
      <group targetFramework="netstandard2.0" />
    </references>""")

        groups = list(reader.get_reference_groups())

        assert len(groups) == 1
        assert groups[0].items == ()

    def test_flat_references(self):
        """Ungrouped references form one Any group."""
        reader = make_reader("""
    <references>
      <reference file="a.dll" />
      <reference />
      <reference file="_._" />
    </references>""")

        groups = list(reader.get_reference_groups())

        assert len(groups) == 1
        assert groups[0].target_framework == ANY_FRAMEWORK
        assert groups[0].items == ("a.dll", "_._")
        assert groups[0].has_empty_folder is True

    def test_groups_suppress_flat_references(self):
        """Flat references are ignored when a group exists."""
        reader = make_reader("""
    <references>
      <reference file="flat.dll" />
      <group targetFramework="net45">
        <reference file="grouped.dll" />
      </group>
    </references>""")

        groups = list(reader.get_reference_groups())

        assert [g.items for g in groups] == [("grouped.dll",)]

    def test_no_references(self):
        """Empty references produce no groups."""
        reader = make_reader("<references />")

        assert list(reader.get_reference_groups()) == []


class TestFrameworkAssemblyGroups:
    """Test framework assembly merging."""

    def test_comma_separated_frameworks_merge(self):
        """A multi-framework declaration equals separate declarations."""
        combined = make_reader("""
    <frameworkAssemblies>
      <frameworkAssembly assemblyName="System.Net.Http" targetFramework="net45,net46" />
    </frameworkAssemblies>""")
        separate = make_reader("""
    <frameworkAssemblies>
      <frameworkAssembly assemblyName="System.Net.Http" targetFramework="net45" />
      <frameworkAssembly assemblyName="System.Net.Http" targetFramework="net46" />
    </frameworkAssemblies>""")

        assert combined.get_framework_assembly_groups() == separate.get_framework_assembly_groups()
        groups = combined.get_framework_assembly_groups()
        assert [g.target_framework for g in groups] == [parse_framework("net45"), parse_framework("net46")]
        assert all(g.items == ("System.Net.Http",) for g in groups)

    def test_equivalent_spellings_merge(self):
        """Different spellings of one framework land in one group."""
        reader = make_reader("""
    <frameworkAssemblies>
      <frameworkAssembly assemblyName="System.Xml" targetFramework="net45" />
      <frameworkAssembly assemblyName="system.xml" targetFramework="net4.5" />
      <frameworkAssembly assemblyName="System.Data" targetFramework="NET45" />
    </frameworkAssemblies>""")

        groups = reader.get_framework_assembly_groups()

        assert len(groups) == 1
        assert groups[0].items == ("System.Data", "System.Xml")

    def test_items_sorted_ignoring_case(self):
        """Items are deduplicated and sorted ignoring case."""
        reader = make_reader("""
    <frameworkAssemblies>
      <frameworkAssembly assemblyName="zeta" targetFramework="net45" />
      <frameworkAssembly assemblyName="Alpha" targetFramework="net45" />
      <frameworkAssembly assemblyName="beta" targetFramework="net45" />
      <frameworkAssembly assemblyName="ALPHA" targetFramework="net45" />
      <frameworkAssembly targetFramework="net45" />
    </frameworkAssemblies>""")

        groups = reader.get_framework_assembly_groups()

        assert groups[0].items == ("Alpha", "beta", "zeta")

    def test_missing_framework_is_any_and_sorted_first(self):
        """Declarations without a framework go to Any, which sorts first."""
        reader = make_reader("""
    <frameworkAssemblies>
      <frameworkAssembly assemblyName="System.Web" targetFramework="net40" />
      <frameworkAssembly assemblyName="System" />
      <frameworkAssembly assemblyName="Unknown" targetFramework="foo12" />
    </frameworkAssemblies>""")

        groups = reader.get_framework_assembly_groups()

        assert [g.target_framework for g in groups] == [
            ANY_FRAMEWORK,
            parse_framework("net40"),
            UNSUPPORTED_FRAMEWORK,
        ]

    def test_no_framework_assemblies(self):
        """No declarations produce an empty list."""
        reader = make_reader("")

        assert reader.get_framework_assembly_groups() == []
