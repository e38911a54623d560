"""Tests for Resource construction and decoding."""

import pytest

from webservice import DecodeError, Failure, Get, InvalidURLError, Post, Resource, Success
from webservice.models import Acronym, PeopleResponse, Person
from webservice.resource import ModelT

ACRONYMS = b'[{"id":1,"short":"AFK","long":"Away From Keyboard"}]'


class TestBuild:
    def test_get_defaults(self):
        """Bare-URL resources are GET without query or body."""
        resource = Resource.get("http://localhost:8080/acronyms", list[Acronym])

        assert resource.request.method == "GET"
        assert resource.request.url == "http://localhost:8080/acronyms"
        assert resource.request.body is None

    def test_get_with_parameters(self):
        resource = Resource.get("http://localhost:8080/acronyms", list[Acronym], {"short": "AFK"})

        assert resource.request.url == "http://localhost:8080/acronyms?short=AFK"

    def test_post(self):
        resource = Resource.post(
            "http://localhost:8080/acronyms", Acronym, {"short": "AFK", "long": "Away From Keyboard"}
        )

        assert resource.request.method == "POST"
        assert resource.request.body == b'{"short":"AFK","long":"Away From Keyboard"}'

    def test_build_with_method(self):
        resource = Resource.build("http://localhost:8080/acronyms", Post(), Acronym)

        assert resource.request.method == "POST"
        assert resource.request.body is None

    def test_build_invalid_host(self):
        with pytest.raises(InvalidURLError):
            Resource.get("http://exa mple.com/acronyms", list[Acronym])

    def test_build_invalid_url(self):
        with pytest.raises(InvalidURLError):
            Resource.build("localhost:8080/acronyms", Get(), list[Acronym])

    def test_resource_is_immutable(self):
        resource = Resource.get("http://localhost:8080/acronyms", list[Acronym])

        with pytest.raises(AttributeError):
            resource.request = None


class TestDecode:
    def test_decode_success(self):
        """Matching bytes decode into the model."""
        resource = Resource.get("http://localhost:8080/acronyms", list[Acronym])

        result = resource.decode(ACRONYMS)

        assert result == Success([Acronym(id=1, short="AFK", long="Away From Keyboard")])
        assert result.is_success

    def test_decode_missing_field(self):
        """A missing required field is a DecodeError naming that field."""
        resource = Resource.get("http://localhost:8080/acronyms", list[Acronym])

        result = resource.decode(b'[{"id":1,"short":"AFK"}]')

        assert isinstance(result, Failure)
        assert not result.is_success
        error = result.error
        assert isinstance(error, DecodeError)
        assert error.field == "long"
        assert error.path == (0, "long")
        assert error.missing
        assert "long" in str(error)

    def test_decode_wrong_type(self):
        resource = Resource.get("http://localhost:8080/acronyms", list[Acronym])

        result = resource.decode(b'[{"id":"one","short":"AFK","long":"Away"}]')

        assert isinstance(result.error, DecodeError)
        assert result.error.field == "id"
        assert not result.error.missing

    def test_decode_invalid_json(self):
        """Non-JSON bytes fail to decode rather than raising."""
        resource = Resource.get("http://localhost:8080/acronyms", list[Acronym])

        result = resource.decode(b"<html>Not Found</html>")

        assert isinstance(result, Failure)
        assert isinstance(result.error, DecodeError)
        assert result.error.field is None

    def test_decode_uses_aliases(self):
        """Person reads its birth field from birth_year."""
        resource = Resource.get("https://swapi.co/api/people", PeopleResponse)

        result = resource.decode(
            b'{"results":[{"name":"Luke Skywalker","gender":"male","birth_year":"19BBY"}]}'
        )

        assert result.unwrap() == PeopleResponse(
            results=[Person(name="Luke Skywalker", gender="male", birth_year="19BBY")]
        )
        assert result.unwrap().results[0].birth == "19BBY"

    def test_failure_unwrap_raises(self):
        resource = Resource.get("http://localhost:8080/acronyms", list[Acronym])

        with pytest.raises(DecodeError):
            resource.decode(b"{}").unwrap()

    def test_resource_is_reusable(self):
        """Decoding has no state carried between calls."""
        resource = Resource.get("http://localhost:8080/acronyms", list[Acronym])

        assert resource.decode(ACRONYMS) == resource.decode(ACRONYMS)
        assert isinstance(resource.decode(b"[{}]"), Failure)
        assert isinstance(resource.decode(ACRONYMS), Success)


class TestStaticResources:
    def test_acronyms_resource(self):
        assert Acronym.all.request.url == "http://localhost:8080/acronyms"
        assert Acronym.all.request.method == "GET"

    def test_people_resource(self):
        assert PeopleResponse.people.request.url == "https://swapi.co/api/people"
        assert PeopleResponse.people.request.method == "GET"


class TestTyping:
    def test_builders_return_parameterized_resource(self):
        """Builders are annotated to carry the model type."""
        hints = Resource.build.__annotations__

        assert hints["model"] == type[ModelT]
        assert hints["return"] == "Resource[ModelT]"

    def test_decoded_value_has_model_type(self):
        resource: Resource[Acronym] = Resource.get("http://localhost:8080/acronyms/1", Acronym)

        value = resource.decode(b'{"id":1,"short":"AFK","long":"Away From Keyboard"}').unwrap()

        assert isinstance(value, Acronym)
