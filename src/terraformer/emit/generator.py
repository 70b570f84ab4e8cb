"""Per-service code generation.

The generation process, for every service of a document:
    1. Extract the foreign symbols the service references
    2. Partition procedures into class methods and free procedures
    3. Assemble the rendering context
    4. Render the service template to text
    5. Write the text to ``<snake_case(service)><ext>``

A service is rendered completely before its output file is opened, so a
resolution error never leaves a partial module behind.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from jinja2 import Environment

from terraformer.config import GeneratorConfig
from terraformer.emit.environment import create_environment
from terraformer.errors import TerraformerError
from terraformer.models.loader import load_service_file
from terraformer.models.service import Service, ServiceFile
from terraformer.transform.dependencies import dependency_modules, extract_dependencies
from terraformer.transform.partitioner import partition_procedures
from terraformer.transform.type_resolver import module_name

logger = logging.getLogger(__name__)


def write_artifact(path: Path, text: str) -> None:
    """Write one generated artifact, replacing any previous content."""
    with path.open("w", encoding="utf-8", newline="\n") as f:
        f.write(text)
    logger.info("Wrote %s", path)


def index_path(output_dir: Path, config: GeneratorConfig) -> Path:
    """Path of the index module inside output_dir."""
    return output_dir / f"{config.index_name}{config.output_extension}"


def check_index_clash(modules: list[str], config: GeneratorConfig) -> None:
    """Reject a service module that would be overwritten by the index.

    Raises
    ------
        TerraformerError: If a module shares the index module's name.

    """
    if config.index_name in modules:
        raise TerraformerError(
            f"Module '{config.index_name}' clashes with the index module; "
            "rename the service or disable the index"
        )


def render_index(environment: Environment, config: GeneratorConfig, modules: list[str]) -> str:
    """Render the index module declaring each module once, sorted."""
    template = environment.get_template(config.index_template)
    return template.render(modules=sorted(set(modules)))


class ServiceGenerator:
    """Generates the module for a single service."""

    def __init__(
        self,
        service_name: str,
        service: Service,
        environment: Environment | None = None,
        config: GeneratorConfig | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
        ----
            service_name: Name of the service in the document.
            service: The service definition.
            environment: Template environment; created from config if omitted.
            config: Generator configuration.

        """
        self.service_name = service_name
        self.service = service
        self.config = config or GeneratorConfig()
        self.environment = environment or create_environment(self.config)

    @property
    def module_name(self) -> str:
        return module_name(self.service_name)

    def build_context(self) -> dict[str, Any]:
        """Assemble the rendering context.

        Raises
        ------
            MalformedTypeError: If any procedure signature cannot be resolved.

        """
        dependencies = extract_dependencies(self.service, self.service_name)
        partitioned = partition_procedures(self.service, self.service_name)

        return {
            "service_name": self.service_name,
            "module_name": self.module_name,
            "service_id": self.service.id,
            "documentation": self.service.documentation,
            "dependencies": dependencies,
            "dependency_modules": dependency_modules(dependencies),
            "classes": dict(sorted(self.service.classes.items())),
            "methods": partitioned.methods,
            "procedures": partitioned.procedures,
            "enumerations": dict(sorted(self.service.enumerations.items())),
        }

    def render(self) -> str:
        """Render the service module to text."""
        template = self.environment.get_template(self.config.service_template)
        return template.render(self.build_context())

    def output_path(self, output_dir: Path) -> Path:
        """Path of this service's module inside output_dir."""
        return output_dir / f"{self.module_name}{self.config.output_extension}"

    def run(self, output_dir: Path) -> Path:
        """Render and write the module.

        Returns
        -------
            Path of the written module.

        """
        text = self.render()
        path = self.output_path(output_dir)
        write_artifact(path, text)
        return path


class DocumentGenerator:
    """Generates the modules for every service of a document."""

    def __init__(
        self,
        service_file: ServiceFile,
        environment: Environment | None = None,
        config: GeneratorConfig | None = None,
    ) -> None:
        self.service_file = service_file
        self.config = config or GeneratorConfig()
        self.environment = environment or create_environment(self.config)

    def service_generators(self) -> list[ServiceGenerator]:
        """One generator per service, in lexicographic order of service name."""
        return [
            ServiceGenerator(name, service, self.environment, self.config)
            for name, service in self.service_file.iter_services()
        ]

    def render_all(self) -> dict[str, str]:
        """Render every service without writing anything.

        Returns
        -------
            Mapping of output file name to generated text, sorted by service name.

        """
        rendered: dict[str, str] = {}
        for generator in self.service_generators():
            rendered[generator.output_path(Path()).name] = generator.render()
        return rendered

    def run(self, output_dir: Path, write_index: bool | None = None) -> list[Path]:
        """Write every service module, then the index if enabled.

        Args:
        ----
            output_dir: Directory receiving the generated files.
            write_index: Overrides ``config.write_index`` when given.

        Returns:
        -------
            Paths written, in order.

        """
        generators = self.service_generators()
        modules = [generator.module_name for generator in generators]
        duplicates = sorted({module for module in modules if modules.count(module) > 1})
        if duplicates:
            raise TerraformerError(
                f"Several services map to the same module: {', '.join(duplicates)}"
            )

        if write_index is None:
            write_index = self.config.write_index
        if write_index:
            check_index_clash(modules, self.config)

        written = [generator.run(output_dir) for generator in generators]

        if write_index:
            index = index_path(output_dir, self.config)
            write_artifact(index, render_index(self.environment, self.config, modules))
            written.append(index)

        return written


def generate(
    path: Path,
    output_dir: Path,
    config: GeneratorConfig | None = None,
) -> list[Path]:
    """Generate modules for every service of one service file.

    Args:
    ----
        path: The service file.
        output_dir: Directory receiving the generated files.
        config: Generator configuration.

    Returns:
    -------
        Paths written.

    Raises:
    ------
        LoaderError: If the file cannot be read or parsed.
        ValidationError: If the document does not match the model.
        MalformedTypeError: If a type cannot be resolved.

    """
    config = config or GeneratorConfig()
    logger.info("Generating from %s", path)
    return DocumentGenerator(load_service_file(path), config=config).run(output_dir)


def find_service_files(services_dir: Path, extension: str) -> list[Path]:
    """List the regular files in services_dir with the given extension, sorted."""
    return sorted(
        entry
        for entry in services_dir.iterdir()
        if entry.is_file() and entry.name.endswith(extension)
    )


def generate_documents(
    documents: list[ServiceFile],
    output_dir: Path,
    config: GeneratorConfig | None = None,
) -> list[Path]:
    """Generate modules for several documents sharing one output directory.

    A single index covering the modules of all documents is written last when
    ``config.write_index`` is set.

    Raises
    ------
        TerraformerError: If two services map to the same module name.

    """
    config = config or GeneratorConfig()
    environment = create_environment(config)
    document_generators = [
        DocumentGenerator(document, environment, config) for document in documents
    ]

    modules: list[str] = []
    for document_generator in document_generators:
        document_modules = [
            generator.module_name for generator in document_generator.service_generators()
        ]
        clashes = sorted(set(document_modules) & set(modules))
        if clashes:
            raise TerraformerError(
                f"Modules defined by more than one service file: {', '.join(clashes)}"
            )
        modules.extend(document_modules)

    if config.write_index:
        check_index_clash(modules, config)

    written: list[Path] = []
    for document_generator in document_generators:
        written.extend(document_generator.run(output_dir, write_index=False))

    if config.write_index:
        index = index_path(output_dir, config)
        write_artifact(index, render_index(environment, config, modules))
        written.append(index)

    return written


def generate_directory(
    services_dir: Path,
    output_dir: Path,
    config: GeneratorConfig | None = None,
) -> list[Path]:
    """Generate modules for every service file found in a directory.

    Every file is loaded before anything is written, so a parse failure in
    one file leaves the output directory untouched.
    """
    config = config or GeneratorConfig()
    documents = []
    for path in find_service_files(services_dir, config.source_extension):
        logger.info("Loading %s", path)
        documents.append(load_service_file(path))
    return generate_documents(documents, output_dir, config)
