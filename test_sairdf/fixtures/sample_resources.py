"""Sample RDF Resources for Testing

Provides a sample project resource in several encodings, together with
malformed inputs, for accessor and codec tests.
"""

from datetime import datetime, timezone

from rdflib import Namespace, URIRef


TESTABLE = Namespace("http://testable.example/ns/testable#")
LDP = Namespace("http://www.w3.org/ns/ldp#")

BASE_URI = "https://data.example/resource"
RESOURCE_URI = "https://data.example/resource#project"
ADDITIONAL_URI = "https://data.example/resource#milestone"

READABLE_ID = 6
READABLE_NAME = "Great Validations"
READABLE_ACTIVE = True
READABLE_CREATED_AT = datetime(2021, 4, 4, 20, 15, 47, tzinfo=timezone.utc)
READABLE_MILESTONE = URIRef("https://data.example/data/projects/project-1/milestone-3/#milestone")
READABLE_TAGS = {
    URIRef("https://data.example/tags/tag-1"),
    URIRef("https://data.example/tags/tag-2"),
    URIRef("https://data.example/tags/tag-3"),
}
READABLE_COMMENTS = {
    "First original comment",
    "Second original comment",
    "Third original comment",
}


def create_project_turtle() -> str:
    """Create the sample project resource as Turtle."""
    return """@prefix rdf: <http://www.w3.org/1999/02/22-rdf-syntax-ns#> .
@prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .
@prefix xsd: <http://www.w3.org/2001/XMLSchema#> .
@prefix ldp: <http://www.w3.org/ns/ldp#> .
@prefix test: <http://testable.example/ns/testable#> .

<> ldp:contains </data/projects/project-1/milestone-3/> .

<#project>
  test:id 6 ;
  test:name "Great Validations" ;
  test:createdAt "2021-04-04T20:15:47.000Z"^^xsd:dateTime ;
  test:active true ;
  test:hasMilestone </data/projects/project-1/milestone-3/#milestone> ;
  test:hasTag
    </tags/tag-1> ,
    </tags/tag-2> ,
    </tags/tag-3> ;
  test:hasComment
    "First original comment" ,
    "Second original comment" ,
    "Third original comment" .
"""


def create_invalid_turtle() -> str:
    """Create Turtle with broken directives and statement terminators."""
    return """PRE rdf: <http://www.w3.org/1999/02/22-rdf-syntax-ns#>
PR rdfs: <http://www.w3.org/2000/01/rdf-schema#>
X test: <http://testable.example/ns/testable#>

<#project>
  test:id 6 ;
  test:name "Great Validations" .
  test:active true ;
  test:hasTag
    </tags/tag-1> ,
    </tags/tag-2> .
    </tags/tag-3> ;
"""


def create_project_ntriples() -> str:
    """Create a subset of the sample project resource as N-Triples."""
    return """<https://data.example/resource#project> <http://testable.example/ns/testable#id> "6"^^<http://www.w3.org/2001/XMLSchema#integer> .
<https://data.example/resource#project> <http://testable.example/ns/testable#name> "Great Validations" .
<https://data.example/resource#project> <http://testable.example/ns/testable#active> "true"^^<http://www.w3.org/2001/XMLSchema#boolean> .
<https://data.example/resource#project> <http://testable.example/ns/testable#hasTag> <https://data.example/tags/tag-1> .
"""


def create_project_rdf_xml() -> str:
    """Create a subset of the sample project resource as RDF/XML with relative IRIs."""
    return """<?xml version="1.0" encoding="utf-8"?>
<rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"
         xmlns:test="http://testable.example/ns/testable#">
  <rdf:Description rdf:about="#project">
    <test:id rdf:datatype="http://www.w3.org/2001/XMLSchema#integer">6</test:id>
    <test:name>Great Validations</test:name>
    <test:hasTag rdf:resource="/tags/tag-1"/>
  </rdf:Description>
</rdf:RDF>
"""


def create_project_jsonld() -> str:
    """Create a subset of the sample project resource as JSON-LD with an inline context."""
    return """{
  "@context": {
    "test": "http://testable.example/ns/testable#",
    "xsd": "http://www.w3.org/2001/XMLSchema#",
    "id": {"@id": "test:id", "@type": "xsd:integer"},
    "name": "test:name",
    "hasTag": {"@id": "test:hasTag", "@type": "@id"}
  },
  "@id": "#project",
  "id": "6",
  "name": "Great Validations",
  "hasTag": ["/tags/tag-1", "/tags/tag-2"]
}
"""


def create_testable_context() -> dict:
    """Create a JSON-LD context document for the testable vocabulary."""
    return {
        "@context": {
            "test": "http://testable.example/ns/testable#",
            "xsd": "http://www.w3.org/2001/XMLSchema#",
            "id": {"@id": "test:id", "@type": "xsd:integer"},
            "name": "test:name",
            "active": {"@id": "test:active", "@type": "xsd:boolean"},
            "hasTag": {"@id": "test:hasTag", "@type": "@id"},
            "hasMilestone": {"@id": "test:hasMilestone", "@type": "@id"}
        }
    }


def create_invalid_jsonld_context() -> str:
    """Create a context document that is not valid JSON."""
    return """  {
      "@context" "https://contexts.example/social-agent-profile.jsonld",
  }"""
