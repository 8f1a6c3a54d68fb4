import unittest
from pathlib import Path
from platformprobe.errors import ProjectDescriptionError, ResolveError
from platformprobe.host.android import FeatureExtension, LibraryExtension
from platformprobe.host.java import JavaPluginConvention
from platformprobe.host.kotlin import KotlinMultiplatformExtension, KotlinPlatformType, KotlinSingleTargetExtension
from platformprobe.host.loader import load_project
from platformprobe.host.project import FileCollection

class TestLoader(unittest.TestCase):

    def setUp(self):
        self.project_dir = Path("/work/sample")
        self.conf = {
            "project": {"name": "sample"},
            "host": {
                "kotlin": {
                    "multiplatform": {
                        "targets": [
                            {
                                "name": "jvm",
                                "platform": "jvm",
                                "compilations": [{
                                    "name": "main",
                                    "dependency_files": ["libs/a.jar", "/opt/libs/b.jar"],
                                    "source_dirs": ["src/jvmMain/kotlin"],
                                }],
                            },
                            {"name": "metadata", "platform": "common"},
                        ],
                    },
                },
            },
        }

    def test_multiplatform_targets(self):
        project = load_project(self.conf, self.project_dir)
        extension = project.extensions.get_by_type(KotlinMultiplatformExtension)
        self.assertEqual(project.name, "sample")
        self.assertEqual(extension.targets.names, ["jvm", "metadata"])
        jvm = extension.targets.get_by_name("jvm")
        self.assertEqual(jvm.platform_type, KotlinPlatformType.JVM)
        compilation = jvm.compilations.get_by_name("main")
        self.assertEqual(
            compilation.compile_dependency_files.files,
            [self.project_dir / "libs/a.jar", Path("/opt/libs/b.jar")],
        )
        self.assertEqual(
            compilation.all_kotlin_source_sets[0].kotlin.src_dirs,
            [self.project_dir / "src/jvmMain/kotlin"],
        )

    def test_single_target(self):
        conf = {"host": {"kotlin": {"single": {"target": {"name": "js", "platform": "js"}}}}}
        project = load_project(conf, self.project_dir)
        self.assertEqual(project.name, "sample")
        self.assertEqual(project.extensions.get_by_type(KotlinSingleTargetExtension).target.name, "js")

    def test_unresolved_dependencies(self):
        target = self.conf["host"]["kotlin"]["multiplatform"]["targets"][0]
        target["compilations"][0]["unresolved_dependencies"] = ["org.example:missing:1.0"]
        project = load_project(self.conf, self.project_dir)
        compilation = project.extensions.get_by_name("kotlin").targets.get_by_name("jvm").compilations.get_by_name("main")
        with self.assertRaises(ResolveError):
            compilation.compile_dependency_files.files

    def test_unknown_platform(self):
        self.conf["host"]["kotlin"]["multiplatform"]["targets"][0]["platform"] = "wasm"
        with self.assertRaises(ProjectDescriptionError):
            load_project(self.conf, self.project_dir)

    def test_target_without_platform(self):
        self.conf["host"]["kotlin"]["multiplatform"]["targets"].append({"name": "ios"})
        with self.assertRaises(ProjectDescriptionError):
            load_project(self.conf, self.project_dir)

    def test_bad_list_value(self):
        self.conf["host"]["kotlin"]["multiplatform"]["targets"][0]["compilations"][0]["source_dirs"] = "src"
        with self.assertRaises(ProjectDescriptionError):
            load_project(self.conf, self.project_dir)

    def test_android_kinds(self):
        project = load_project({"host": {"android": {"kind": "library", "variants": ["release"]}}}, self.project_dir)
        self.assertTrue(project.is_android_project())
        self.assertIsInstance(project.extensions.get_by_name("android"), LibraryExtension)

        conf = {"host": {"android": {"kind": "feature", "feature_variants": ["release"]}}}
        android = load_project(conf, self.project_dir).extensions.get_by_name("android")
        self.assertIsInstance(android, FeatureExtension)
        self.assertEqual([v.name for v in android.feature_variants], ["release"])

    def test_unknown_android_kind(self):
        with self.assertRaises(ProjectDescriptionError):
            load_project({"host": {"android": {"kind": "wear"}}}, self.project_dir)

    def test_java_convention(self):
        conf = {"host": {"java": {"source_sets": {"main": ["src/main/java"], "test": ["src/test/java"]}}}}
        project = load_project(conf, self.project_dir)
        convention = project.convention.find_by_type(JavaPluginConvention)
        self.assertEqual(convention.source_sets.names, ["main", "test"])
        self.assertEqual(convention.source_sets.get_by_name("main").all_source.src_dirs,
                         [self.project_dir / "src/main/java"])
        self.assertFalse(project.is_android_project())

    def test_tasks(self):
        conf = {"host": {"tasks": [
            {"name": "compileKotlin", "source_roots": ["src/main/kotlin"], "classpath": ["libs/a.jar"], "lazy": True},
            {"name": "compileTestKotlin", "classpath": ["libs/b.jar"]},
        ]}}
        project = load_project(conf, self.project_dir)
        self.assertEqual(project.tasks.names, ["compileKotlin", "compileTestKotlin"])
        lazy = project.tasks.get_by_name("compileKotlin")
        self.assertIsInstance(lazy.get_classpath(), FileCollection)
        self.assertEqual(lazy.source_roots_container.source_roots, [self.project_dir / "src/main/kotlin"])
        self.assertEqual(project.tasks.get_by_name("compileTestKotlin").get_classpath(),
                         [self.project_dir / "libs/b.jar"])

    def test_empty_description(self):
        project = load_project({}, self.project_dir)
        self.assertIsNone(project.extensions.find_by_name("kotlin"))
        self.assertEqual(len(project.tasks), 0)

if __name__ == "__main__":
    unittest.main()
