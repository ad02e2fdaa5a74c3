"""Provisioning script for the Supabase tables backing the admin panel."""

from __future__ import annotations

SCHEMA_TABLES: tuple[str, ...] = ("menu_items", "reservations", "announcements")

_SCHEMA_SCRIPT = """-- COMANDO DE RECUPERAÇÃO DO SISTEMA
DROP TABLE IF EXISTS menu_items;
DROP TABLE IF EXISTS reservations;
DROP TABLE IF EXISTS announcements;

create table reservations (
  id uuid default gen_random_uuid() primary key,
  created_at timestamp with time zone default timezone('utc'::text, now()) not null,
  client_name text,
  phone text,
  pax int,
  date text,
  time text,
  table_type text,
  status text default 'confirmed'
);

create table announcements (
  id uuid default gen_random_uuid() primary key,
  created_at timestamp with time zone default timezone('utc'::text, now()) not null,
  message text,
  is_active boolean default true
);

create table menu_items (
  id text primary key,
  name text,
  description text,
  price numeric,
  category text,
  highlight boolean,
  image text
);

alter table reservations enable row level security;
alter table announcements enable row level security;
alter table menu_items enable row level security;

create policy "Public Access" on reservations for all using (true) with check (true);
create policy "Public Access" on announcements for all using (true) with check (true);
create policy "Public Access" on menu_items for all using (true) with check (true);
"""


def generate_schema_script() -> str:
    """Return the drop/create/RLS script. Takes no input and never changes."""
    return _SCHEMA_SCRIPT
