import tempfile
import unittest
from pathlib import Path
from platformprobe.errors import ResolveError, UnknownDomainObjectError
from platformprobe.host.android import AppExtension
from platformprobe.host.kotlin import KotlinCompilation, KotlinPlatformType, KotlinSourceSet, KotlinTarget
from platformprobe.host.project import ExtensionContainer, FileCollection, Project
from platformprobe.utils.compilations import get_classpath, get_main_compilation, get_source_set

class TestCompilations(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.root = Path(self.tmp.name)
        for name in ("a.jar", "b.jar"):
            (self.root / name).touch()
        for name in ("src/main/kotlin", "src/main/java", "src/release/kotlin"):
            (self.root / name).mkdir(parents=True)
        self.project = Project("lib", self.root)
        self.main = KotlinCompilation(
            "main",
            self.project.files("a.jar", "missing.jar", "b.jar"),
            [
                KotlinSourceSet("main", [self.root / "src/main/kotlin", self.root / "src/main/java"]),
                KotlinSourceSet("generated", [self.root / "build/generated"]),
            ],
        )
        self.release = KotlinCompilation(
            "release",
            self.project.files("b.jar"),
            [KotlinSourceSet("release", [self.root / "src/release/kotlin"])],
        )
        self.target = KotlinTarget("jvm", KotlinPlatformType.JVM, [self.main, self.release])

    def tearDown(self):
        self.tmp.cleanup()

    def test_no_target(self):
        self.assertIsNone(get_main_compilation(self.project, None))
        self.assertEqual(get_classpath(self.project, None), [])
        self.assertEqual(get_source_set(self.project, None), [])

    def test_main_compilation(self):
        self.assertIs(get_main_compilation(self.project, self.target), self.main)

    def test_classpath_is_filtered(self):
        self.assertEqual(get_classpath(self.project, self.target), [self.root / "a.jar", self.root / "b.jar"])

    def test_source_set_unions_all_source_sets(self):
        self.assertEqual(
            get_source_set(self.project, self.target),
            [self.root / "src/main/kotlin", self.root / "src/main/java"],
        )

    def test_missing_compilation(self):
        target = KotlinTarget("js", KotlinPlatformType.JS, [self.release])
        with self.assertRaises(UnknownDomainObjectError):
            get_main_compilation(self.project, target)

    def test_android_project_uses_release_compilation(self):
        project = Project("app", self.root, extensions=ExtensionContainer({
            "android": AppExtension(application_variants=["debug", "release"]),
        }))
        self.assertIs(get_main_compilation(project, self.target), self.release)
        self.assertEqual(get_source_set(project, self.target), [self.root / "src/release/kotlin"])

    def test_compilation_without_dependencies(self):
        target = KotlinTarget("native", KotlinPlatformType.NATIVE, [KotlinCompilation("main")])
        self.assertEqual(get_classpath(self.project, target), [])
        self.assertEqual(get_source_set(self.project, target), [])


class TestFileCollection(unittest.TestCase):

    def test_union_is_lazy_and_ordered(self):
        union = FileCollection(["b", "a"]) + FileCollection(["a", "c"])
        self.assertEqual(union.files, [Path("b"), Path("a"), Path("c")])

    def test_unresolved_dependencies_fail_on_read(self):
        union = FileCollection(["a"]) + FileCollection(unresolved=["org.example:missing:1.0"])
        with self.assertRaises(ResolveError):
            union.files

if __name__ == "__main__":
    unittest.main()
