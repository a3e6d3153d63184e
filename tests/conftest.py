"""Shared fixtures for wexample-filestate-go tests."""

from __future__ import annotations

import pytest


@pytest.fixture
def unordered_go_source() -> bytes:
    """A file touching every category, with comments, generics and irregular spacing."""
    return b"""// Copyright notice, stays above the package clause.

// Package shapes is a test fixture.
package shapes // trailing package comment

import "fmt"

// Helpers for rendering.
func render2() {}

func render10() {}

// Area computes things.
func (s *Square[T]) Area() int { return 0 }

type Square[T any] struct {
	// side length
	side T
}


var registry = map[string]int{}

/* Circle is round. */
// It has a radius.
type Circle struct{ r int }

func main() {
	fmt.Println("hi")
}

const (
	Pi = 3
	E  = 2
)

func (c Circle) Perimeter() int { return 0 }

func (c *Circle) Area() int { return 0 }

func (p Polygon) Sides() int { return 0 }

const Zero = 0

// trailing file comment
"""
