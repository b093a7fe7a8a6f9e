"""Human-maintained catalog data.

This file contains data that should be manually curated and extended:
the category list of the tools page and the colors of known language and
technology tags. Tags missing here are still rendered, with preset colors.
"""

from typing import Final

from src.models.model_catalog import Category
from src.models.model_tags import CanonicalTag

CATEGORY_LIST: Final[tuple[Category, ...]] = (
    Category(
        name="APIs",
        description="The following is a list of APIs that expose functionality related to AsyncAPI.",
    ),
    Category(
        name="Code-first tools",
        description="The following is a list of tools that generate AsyncAPI documents from your code.",
    ),
    Category(
        name="Code Generators",
        description="The following is a list of tools that generate code from an AsyncAPI document; not the other way around.",
    ),
    Category(
        name="Converters",
        description="The following is a list of tools that do not yet belong to any specific category but are also useful for the community.",
    ),
    Category(
        name="Directories",
        description="The following is a list of directories that index public AsyncAPI documents.",
    ),
    Category(
        name="Documentation Generators",
        description="The following is a list of tools that generate human-readable documentation from an AsyncAPI document.",
    ),
    Category(
        name="Editors",
        description="The following is a list of editors or related tools that allow editing of AsyncAPI document.",
    ),
    Category(
        name="UI components",
        description="The following is a list of UI components to view AsyncAPI documents.",
    ),
    Category(
        name="DSL",
        description="Writing YAML by hand is no fun, and maybe you don't want a GUI, so use a Domain Specific Language to write AsyncAPI in your language of choice.",
    ),
    Category(
        name="Frameworks",
        description="The following is a list of API/application frameworks that make use of AsyncAPI.",
    ),
    Category(
        name="GitHub Actions",
        description="The following is a list of GitHub Actions that you can use in your workflows.",
    ),
    Category(
        name="Mocking and Testing",
        description="The tools below take specification documents as input, then publish fake messages to broker destinations for simulation purposes.",
    ),
    Category(
        name="Validators",
        description="The following is a list of tools that validate AsyncAPI documents.",
    ),
    Category(
        name="Compare tools",
        description="The following is a list of tools that compare AsyncAPI documents.",
    ),
    Category(
        name="CLIs",
        description="The following is a list of tools that you can work with in terminal or do some CI/CD automation.",
    ),
    Category(
        name="Bundlers",
        description="The following is a list of tools that you can work with to bundle AsyncAPI documents.",
    ),
    Category(
        name="IDE Extensions",
        description="The following is a list of extensions for different IDEs like VSCode, IntelliJ IDEA and others.",
    ),
    Category(
        name="AsyncAPI Generator Templates",
        description="The following is a list of templates compatible with AsyncAPI Generator.",
    ),
    Category(
        name="Others",
        description="The following is a list of tools that comes under Other category.",
    ),
)


# Known language tags with their card colors
LANGUAGES_COLOR: Final[tuple[CanonicalTag, ...]] = (
    CanonicalTag(name="Go/Golang", color="bg-[#8ECFDF]", border_color="border-[#00AFD9]"),
    CanonicalTag(name="Java", color="bg-[#ECA2A4]", border_color="border-[#EC2125]"),
    CanonicalTag(name="JavaScript", color="bg-[#F2F1C7]", border_color="border-[#BFBE86]"),
    CanonicalTag(name="HTML", color="bg-[#E2A291]", border_color="border-[#E44D26]"),
    CanonicalTag(name="C/C++", color="bg-[#93CDEF]", border_color="border-[#0080CC]"),
    CanonicalTag(name="C#", color="bg-[#E3AFE0]", border_color="border-[#9B4F96]"),
    CanonicalTag(name="Python", color="bg-[#A8D0EF]", border_color="border-[#3878AB]"),
    CanonicalTag(name="TypeScript", color="bg-[#7DBCFE]", border_color="border-[#2C78C7]"),
    CanonicalTag(name="Kotlin", color="bg-[#B1ACDF]", border_color="border-[#756BD9]"),
    CanonicalTag(name="Scala", color="bg-[#FFA299]", border_color="border-[#DF301F]"),
    CanonicalTag(name="Markdown", color="bg-[#BABEBF]", border_color="border-[#445B64]"),
    CanonicalTag(name="YAML", color="bg-[#FFB764]", border_color="border-[#F1901F]"),
    CanonicalTag(name="R", color="bg-[#84B5ED]", border_color="border-[#246BBE]"),
    CanonicalTag(name="Ruby", color="bg-[#FF8289]", border_color="border-[#FF000F]"),
    CanonicalTag(name="Rust", color="bg-[#FFB8AA]", border_color="border-[#E43716]"),
    CanonicalTag(name="Shell", color="bg-[#87D4FF]", border_color="border-[#389ED7]"),
    CanonicalTag(name="Groovy", color="bg-[#B6D5E5]", border_color="border-[#609DBC]"),
)

# Known technology tags with their card colors
TECHNOLOGIES_COLOR: Final[tuple[CanonicalTag, ...]] = (
    CanonicalTag(name="Node js", color="bg-[#BDFF67]", border_color="border-[#84CE24]"),
    CanonicalTag(name="Hermes", color="bg-[#8AEEBD]", border_color="border-[#2AB672]"),
    CanonicalTag(name="React JS", color="bg-[#9FECFA]", border_color="border-[#08D8FE]"),
    CanonicalTag(name=".NET", color="bg-[#A184FF]", border_color="border-[#5026D4]"),
    CanonicalTag(name="ASP.NET", color="bg-[#71C2FB]", border_color="border-[#1577BC]"),
    CanonicalTag(name="Springboot", color="bg-[#98E279]", border_color="border-[#68BC44]"),
    CanonicalTag(name="AWS", color="bg-[#FF9F59]", border_color="border-[#EF6703]"),
    CanonicalTag(name="Docker", color="bg-[#B8E0FF]", border_color="border-[#2596ED]"),
    CanonicalTag(name="Node-RED", color="bg-[#FF7474]", border_color="border-[#8F0101]"),
    CanonicalTag(name="Maven", color="bg-[#FF6B80]", border_color="border-[#CA1A33]"),
    CanonicalTag(name="Saas", color="bg-[#6AB8EC]", border_color="border-[#2275AD]"),
    CanonicalTag(name="Kubernetes-native", color="bg-[#D7C7F2]", border_color="border-[#A387D2]"),
    CanonicalTag(name="Scala", color="bg-[#D7C7F2]", border_color="border-[#A387D2]"),
    CanonicalTag(name="Azure", color="bg-[#4B93FF]", border_color="border-[#015ADF]"),
    CanonicalTag(name="Jenkins", color="bg-[#D7C7F2]", border_color="border-[#A387D2]"),
    CanonicalTag(name="Flask", color="bg-[#D7C7F2]", border_color="border-[#A387D2]"),
    CanonicalTag(name="Nest Js", color="bg-[#E1224E]", border_color="border-[#B9012B]"),
    CanonicalTag(name="Kafka", color="bg-[#D7C7F2]", border_color="border-[#A387D2]"),
    CanonicalTag(name="Gradle", color="bg-[#D7C7F2]", border_color="border-[#A387D2]"),
    CanonicalTag(name="Spring Cloud Streams", color="bg-[#D7C7F2]", border_color="border-[#A387D2]"),
    CanonicalTag(name="Kubernetes", color="bg-[#B8E0FF]", border_color="border-[#2596ED]"),
)
