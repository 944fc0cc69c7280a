import torch

from nanovec import Buffer, swap


a = Buffer.from_list([1.0, 3.0, 5.0, 7.0])
b = Buffer.from_list([2.0, 4.0, 6.0, 8.0])

# slices are views, writes go to the underlying buffer
head = a[0:2]
head[0] = 10.0
print(a)

# copy() is the only way to get independent storage
c = a.copy()
c[0] = 1.0
print(a, c)

# fixed capacity, grown with append/extend
sums = Buffer(4)
sums.extend(x + y for x, y in zip(a[0:2], b[2:4]))
print(sums, sums.capacity)

# strided views compose and can be materialized
evens = Buffer.from_list(list(range(10)))[::2]
print(evens[1:], evens.to_buffer())

swap(a, b)
print(a, b)

print(Buffer.from_tensor(torch.linspace(0, 1, 5)).to_tensor())
